from .BhapService import BhapService
from .IdAllocator import IdAllocator
from .UserService import UserService
from .VoteService import VoteService

__all__ = [
    "BhapService",
    "IdAllocator",
    "UserService",
    "VoteService",
]
