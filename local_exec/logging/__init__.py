"""Module de logging."""

from local_exec.logging.base import Logger
from local_exec.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
