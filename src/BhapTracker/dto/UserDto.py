from BhapTracker.share.BaseDto import BaseDto


class UserDto(BaseDto):
    """
    用户的数据传输对象
    """

    id: int
    email: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
