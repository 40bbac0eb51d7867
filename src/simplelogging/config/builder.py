"""
Construção de loggers a partir de configuração.

Aplica um ``LogSettings`` a um ``LogContext``: modos, nome do programa,
traduções de nomes de classe e, quando informados, os loggers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from simplelogging.config.loader import ConfigLoader
from simplelogging.config.models import LoggerSettings, LogSettings
from simplelogging.constants import DEFAULT_TEMPLATE
from simplelogging.context import LogContext, get_context
from simplelogging.formatters import FormatterFactory, LogFormatter
from simplelogging.levels import get_level
from simplelogging.logger import Logger
from simplelogging.writers import ConsoleWriter, FileWriter, LogWriter

_logger = logging.getLogger(__name__)


def build_formatter(settings: LoggerSettings, context: LogContext) -> LogFormatter:
    if settings.formatter == "template":
        return FormatterFactory.create(
            "template", template=settings.template or DEFAULT_TEMPLATE, context=context
        )
    return FormatterFactory.create(settings.formatter, context=context)


def build_writer(settings: LoggerSettings, context: LogContext) -> LogWriter:
    if settings.writer == "file":
        return FileWriter(
            settings.path,
            ansi=settings.ansi,
            stack_traces_only_in_debug=settings.stack_traces_only_in_debug,
            context=context,
        )
    return ConsoleWriter(settings.stack_traces_only_in_debug, context=context)


def build_logger(settings: LoggerSettings, context: Optional[LogContext] = None) -> Logger:
    """
    Cria um logger a partir da configuração.

    Args:
        settings: Configuração do logger
        context: Contexto compartilhado (padrão: contexto do processo)

    Returns:
        Logger: Logger configurado
    """
    context = context if context is not None else get_context()

    logger = Logger.create(
        build_formatter(settings, context),
        build_writer(settings, context),
        context=context,
    )
    logger.default_level = get_level(settings.default_level)
    logger.default_sandbox_warning = settings.default_sandbox_warning
    logger.include_untranslated_class_name = settings.include_untranslated_class_name
    logger.initiation_message = settings.initiation_message

    _logger.debug("Logger criado: writer=%s formatter=%s", settings.writer, settings.formatter)
    return logger


def configure(settings: Union[LogSettings, str, Path, None] = None, *,
              context: Optional[LogContext] = None) -> LogContext:
    """
    Aplica configuração a um contexto.

    Args:
        settings: LogSettings pronto, caminho de arquivo YAML, ou None
            para carregar o arquivo padrão (com overrides de ambiente)
        context: Contexto alvo (padrão: contexto do processo)

    Returns:
        LogContext: O contexto configurado
    """
    if not isinstance(settings, LogSettings):
        settings = ConfigLoader.load(settings)

    context = context if context is not None else get_context()

    with context.lock:
        context.set_settings(settings.sandbox_mode, settings.debug_mode, settings.program_name)
        context.console_ansi = settings.console_ansi
        for source, name in settings.class_names.items():
            context.register_class_name(source, name)

        if settings.loggers is not None:
            context.loggers = [build_logger(item, context) for item in settings.loggers]

    _logger.debug("Contexto configurado: %r", context)
    return context


__all__ = ["build_formatter", "build_writer", "build_logger", "configure"]
