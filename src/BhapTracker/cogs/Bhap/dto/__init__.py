from .BhapPageDto import BhapPageDto
from .VoteTallyDto import VoteTallyDto

__all__ = [
    "BhapPageDto",
    "VoteTallyDto",
]
