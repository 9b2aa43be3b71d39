import logging
import os


class LoggingConfigurator:
    """
    一个用于集中配置项目日志记录器的类。
    """

    def __init__(self, rootLogLevel: str = "INFO"):
        """
        初始化配置器。
        :param rootLogLevel: 从 .env 文件读取的根日志级别字符串。
        """
        self.logLevel = getattr(logging, rootLogLevel.upper(), logging.INFO)
        self.formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(name)s: %(message)s")
        self.streamHandler = logging.StreamHandler()
        self.streamHandler.setFormatter(self.formatter)

    def configure(self):
        """
        应用所有日志配置。
        """
        self._configurePackageLogger("bhap_tracker")
        self._configurePackageLogger("BhapTracker")
        self._configureSqlAlchemyLogger()
        logging.getLogger("bhap_tracker").info("日志记录器配置完成。")

    def _configurePackageLogger(self, name: str):
        """
        配置项目自身的日志记录器。
        模块内用 logging.getLogger(__name__) 创建的记录器挂在 "BhapTracker" 下，
        其余具名记录器挂在 "bhap_tracker" 下。
        """
        logger = logging.getLogger(name)
        logger.setLevel(self.logLevel)
        if not logger.handlers:
            logger.addHandler(self.streamHandler)
        logger.propagate = False

    def _configureSqlAlchemyLogger(self):
        """配置 SQLAlchemy 的日志记录器。"""
        log_level_str = os.getenv("SQLALCHEMY_LOG_LEVEL", "WARNING").upper()
        log_level = getattr(logging, log_level_str, logging.WARNING)

        sql_logger = logging.getLogger("sqlalchemy.engine")
        sql_logger.setLevel(log_level)
        if not sql_logger.handlers:
            sql_logger.addHandler(self.streamHandler)
        sql_logger.propagate = False
