from .AllocationConflict import AllocationConflict
from .BhapTrackerError import BhapTrackerError
from .DuplicateVote import DuplicateVote
from .InconsistentVoterCount import InconsistentVoterCount
from .InvalidTransition import InvalidTransition
from .InvalidVoteValue import InvalidVoteValue
from .NoEligibleVoters import NoEligibleVoters
from .NotFound import NotFound
from .NotPermitted import NotPermitted

__all__ = [
    "AllocationConflict",
    "BhapTrackerError",
    "DuplicateVote",
    "InconsistentVoterCount",
    "InvalidTransition",
    "InvalidVoteValue",
    "NoEligibleVoters",
    "NotFound",
    "NotPermitted",
]
