from .BhapStatus import BhapStatus
from .OptionsMode import OptionsMode
from .VoteValue import VoteValue

__all__ = [
    "BhapStatus",
    "OptionsMode",
    "VoteValue",
]
