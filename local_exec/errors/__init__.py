"""Module de gestion des erreurs."""

from local_exec.errors.base import ErrorHandler, ErrorHandlerChain
from local_exec.errors.exceptions import (ApplicationError,
                                          ConfigurationError,
                                          FileConfigurationError,
                                          InvalidArgumentError,
                                          ExecutionError)
from local_exec.errors.console_handler import ConsoleErrorHandler
from local_exec.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "InvalidArgumentError",
    "ExecutionError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
