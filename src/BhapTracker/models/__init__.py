from .BaseModel import BaseModel
from .Bhap import Bhap
from .User import User
from .Vote import Vote

__all__ = [
    "BaseModel",
    "Bhap",
    "User",
    "Vote",
]
