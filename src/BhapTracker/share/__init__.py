from .BaseDto import BaseDto
from .DatabaseHandler import DatabaseHandler
from .LoggingConfigurator import LoggingConfigurator
from .MarkdownRenderer import MarkdownRenderer
from .TimeUtils import TimeUtils
from .UnitOfWork import UnitOfWork

__all__ = [
    "BaseDto",
    "DatabaseHandler",
    "LoggingConfigurator",
    "MarkdownRenderer",
    "TimeUtils",
    "UnitOfWork",
]
