from .BhapLogic import BhapLogic
from .LifecycleService import LifecycleService
from .TallyService import TallyService

__all__ = [
    "BhapLogic",
    "LifecycleService",
    "TallyService",
]
