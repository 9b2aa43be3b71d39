class BhapTrackerError(Exception):
    """
    本项目所有业务异常的基类。
    """

    default_message = "发生了一个未知的业务错误。"

    def __init__(self, message: str | None = None):
        """
        Args:
            message (str, optional): 错误描述。未提供时使用该类的默认消息。
        """
        self.message = message or self.default_message
        super().__init__(self.message)
