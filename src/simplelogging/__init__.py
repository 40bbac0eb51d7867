"""
simplelogging: logging síncrono com façade, formatadores e writers.

A façade ``Log`` repassa mensagens a uma lista de ``Logger``; cada
logger combina um ``LogFormatter`` e um ``LogWriter`` e anuncia uma
única vez cada mudança dos modos debug e sandbox.
"""

import logging

from simplelogging.ansi import AnsiColor
from simplelogging.levels import DEBUG, ERROR, FATAL, INFO, WARNING, Level, get_level, levels, register_level
from simplelogging.record import LogRecord
from simplelogging.context import LogContext, get_context, reset_context, set_context
from simplelogging.formatters import (
    SUPPRESSED,
    DefaultLogFormatter,
    FormatResult,
    FormatterFactory,
    LogFormatter,
    StringLogFormatter,
    Suppressed,
    Text,
)
from simplelogging.writers import ConsoleWriter, DebugGatedWriter, FileWriter, LogWriter
from simplelogging.logger import BoundLogger, FormatterAndWriter, FormatterWriterPair, Logger
from simplelogging.facade import Log
from simplelogging.exceptions import (
    ConfigLoaderException,
    InvalidArgumentError,
    SimpleLoggingError,
    ValidationException,
)
from simplelogging.utils import source_of
from simplelogging.config import ConfigLoader, LoggerSettings, LogSettings, build_logger, configure

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Singleton da façade, sempre sobre o contexto do processo
_log_instance = None


def get_log() -> Log:
    """Retorna a instância singleton da façade."""
    global _log_instance
    if _log_instance is None:
        _log_instance = Log()
    return _log_instance


# Exporta a instância global
log = get_log()

__all__ = [
    "AnsiColor",
    "Level",
    "FATAL",
    "ERROR",
    "WARNING",
    "INFO",
    "DEBUG",
    "get_level",
    "levels",
    "register_level",
    "LogRecord",
    "LogContext",
    "get_context",
    "set_context",
    "reset_context",
    "FormatResult",
    "Text",
    "Suppressed",
    "SUPPRESSED",
    "LogFormatter",
    "DefaultLogFormatter",
    "StringLogFormatter",
    "FormatterFactory",
    "LogWriter",
    "DebugGatedWriter",
    "ConsoleWriter",
    "FileWriter",
    "FormatterAndWriter",
    "FormatterWriterPair",
    "Logger",
    "BoundLogger",
    "Log",
    "get_log",
    "log",
    "SimpleLoggingError",
    "InvalidArgumentError",
    "ValidationException",
    "ConfigLoaderException",
    "source_of",
    "ConfigLoader",
    "LoggerSettings",
    "LogSettings",
    "build_logger",
    "configure",
]
