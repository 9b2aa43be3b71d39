from .CastVoteQo import CastVoteQo
from .CreateBhapQo import CreateBhapQo
from .EditBhapQo import EditBhapQo
from .TransitionStatusQo import TransitionStatusQo

__all__ = [
    "CastVoteQo",
    "CreateBhapQo",
    "EditBhapQo",
    "TransitionStatusQo",
]
