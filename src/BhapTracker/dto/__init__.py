from .BhapDto import BhapDto
from .UserDto import UserDto
from .VoteDto import VoteDto

__all__ = [
    "BhapDto",
    "UserDto",
    "VoteDto",
]
