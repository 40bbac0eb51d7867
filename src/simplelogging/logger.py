"""
Logger: par formatador + writer com controle de transições de modo.

Cada ``Logger`` lembra se já escreveu alguma linha e quais modos debug e
sandbox viu por último. Na primeira chamada escreve a mensagem de
iniciação, e a cada mudança de modo escreve exatamente um anúncio.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Optional

from simplelogging.constants import (
    DEFAULT_INCLUDE_UNTRANSLATED_CLASS_NAME,
    DEFAULT_INITIATION_MESSAGE,
    DEFAULT_SANDBOX_WARNING,
)
from simplelogging.context import LogContext, get_context
from simplelogging.exceptions import InvalidArgumentError
from simplelogging.formatters import DefaultLogFormatter, FormatResult, LogFormatter, Text
from simplelogging.levels import DEBUG, ERROR, FATAL, INFO, WARNING, Level
from simplelogging.record import LogRecord
from simplelogging.utils import source_of
from simplelogging.writers import ConsoleWriter, LogWriter


class FormatterAndWriter(ABC):
    """
    Pipeline completo de um logger: formata e escreve.

    Diferente de ``LogFormatter``, os métodos de formatação não recebem
    a flag ANSI: a própria implementação sabe se o destino aceita ANSI.
    """

    @abstractmethod
    def format(self, record: LogRecord) -> FormatResult:
        pass

    @abstractmethod
    def sandbox_warning(self) -> FormatResult:
        pass

    @abstractmethod
    def startup_sandbox_announcement(self, enabled: bool) -> FormatResult:
        pass

    @abstractmethod
    def startup_debug_announcement(self, enabled: bool) -> FormatResult:
        pass

    @abstractmethod
    def write(self, text: str) -> None:
        pass

    @abstractmethod
    def is_ansi(self) -> bool:
        pass

    @abstractmethod
    def write_stack_trace(self, exc: BaseException) -> None:
        pass


class FormatterWriterPair(FormatterAndWriter):
    """Combina um ``LogFormatter`` e um ``LogWriter`` independentes."""

    def __init__(self, formatter: LogFormatter, writer: LogWriter):
        self.formatter = formatter
        self.writer = writer

    def format(self, record: LogRecord) -> FormatResult:
        return self.formatter.format(record, self.writer.is_ansi())

    def sandbox_warning(self) -> FormatResult:
        return self.formatter.sandbox_warning(self.writer.is_ansi())

    def startup_sandbox_announcement(self, enabled: bool) -> FormatResult:
        return self.formatter.startup_sandbox_announcement(self.writer.is_ansi(), enabled)

    def startup_debug_announcement(self, enabled: bool) -> FormatResult:
        return self.formatter.startup_debug_announcement(self.writer.is_ansi(), enabled)

    def write(self, text: str) -> None:
        self.writer.write(text)

    def is_ansi(self) -> bool:
        return self.writer.is_ansi()

    def write_stack_trace(self, exc: BaseException) -> None:
        self.writer.write_stack_trace(exc)


class LevelMethodsMixin:
    """Atalhos por nível sobre um método ``log(message, level, sandbox_warning, source=)``."""

    def fatal(self, message: str, sandbox_warning: Optional[bool] = None, *, source: Any = None) -> None:
        """Registra um erro fatal."""
        self.log(message, FATAL, sandbox_warning, source=source)

    def error(self, message: str, sandbox_warning: Optional[bool] = None, *, source: Any = None) -> None:
        """Registra um erro."""
        self.log(message, ERROR, sandbox_warning, source=source)

    def warning(self, message: str, sandbox_warning: Optional[bool] = None, *, source: Any = None) -> None:
        """Registra uma advertência."""
        self.log(message, WARNING, sandbox_warning, source=source)

    def info(self, message: str, sandbox_warning: Optional[bool] = None, *, source: Any = None) -> None:
        """Registra mensagem informativa."""
        self.log(message, INFO, sandbox_warning, source=source)

    def debug(self, message: str, sandbox_warning: Optional[bool] = None, *, source: Any = None) -> None:
        """Registra mensagem de depuração."""
        self.log(message, DEBUG, sandbox_warning, source=source)


class Logger(LevelMethodsMixin):
    """
    Logger com máquina de estados de transição de modo.

    Attributes:
        default_level: Nível usado quando ``log`` não recebe nível
        default_sandbox_warning: Valor padrão de ``sandbox_warning``
        include_untranslated_class_name: Se origens sem tradução aparecem pelo caminho cru
        initiation_message: Linha escrita antes do primeiro log (None desativa)
    """

    def __init__(self, pipeline: FormatterAndWriter, *, context: Optional[LogContext] = None):
        """
        Inicializa o logger.

        Args:
            pipeline: Formatador e writer combinados
            context: Contexto com modos e traduções (padrão: contexto do processo)

        Raises:
            InvalidArgumentError: Se pipeline for None
        """
        if pipeline is None:
            raise InvalidArgumentError("'Formatter and writer' não pode ser None")

        self.pipeline = pipeline
        self._context = context

        self.default_level: Level = INFO
        self.default_sandbox_warning: bool = DEFAULT_SANDBOX_WARNING
        self.include_untranslated_class_name: bool = DEFAULT_INCLUDE_UNTRANSLATED_CLASS_NAME
        self.initiation_message: Optional[str] = DEFAULT_INITIATION_MESSAGE

        self._has_logged_before = False
        self._last_seen_debug_mode = False
        self._last_seen_sandbox_mode = False
        self._lock = threading.RLock()

    @classmethod
    def create(cls, formatter: Optional[LogFormatter] = None, writer: Optional[LogWriter] = None,
               *, context: Optional[LogContext] = None) -> Logger:
        """
        Cria um logger a partir de formatador e writer separados.

        Args:
            formatter: Formatador (padrão: DefaultLogFormatter)
            writer: Writer (padrão: ConsoleWriter)
            context: Contexto compartilhado com os componentes padrão

        Returns:
            Logger: Logger pronto para uso
        """
        if formatter is None:
            formatter = DefaultLogFormatter(context=context)
        if writer is None:
            writer = ConsoleWriter(context=context)
        return cls(FormatterWriterPair(formatter, writer), context=context)

    @property
    def context(self) -> LogContext:
        return self._context if self._context is not None else get_context()

    @property
    def has_logged_before(self) -> bool:
        return self._has_logged_before

    @property
    def last_seen_debug_mode(self) -> bool:
        return self._last_seen_debug_mode

    @property
    def last_seen_sandbox_mode(self) -> bool:
        return self._last_seen_sandbox_mode

    def log(self, message: str, level: Optional[Level] = None,
            sandbox_warning: Optional[bool] = None, *, source: Any = None) -> None:
        """
        Registra uma mensagem.

        Args:
            message: Mensagem
            level: Nível (padrão: ``default_level``)
            sandbox_warning: Se deve anexar o aviso de sandbox (padrão: ``default_sandbox_warning``)
            source: Origem da chamada (caminho pontilhado ou objeto)
        """
        if level is None:
            level = self.default_level
        if sandbox_warning is None:
            sandbox_warning = self.default_sandbox_warning

        context = self.context
        with self._lock:
            debug_mode = context.debug_mode
            sandbox_mode = context.sandbox_mode

            if not self._has_logged_before and self.initiation_message is not None:
                self.pipeline.write(self.initiation_message)

            if self._last_seen_debug_mode != debug_mode:
                self._write(self.pipeline.startup_debug_announcement(debug_mode))
            if self._last_seen_sandbox_mode != sandbox_mode:
                self._write(self.pipeline.startup_sandbox_announcement(sandbox_mode))

            # Estado confirmado antes da formatação, sem rollback
            self._last_seen_debug_mode = debug_mode
            self._last_seen_sandbox_mode = sandbox_mode
            self._has_logged_before = True

            class_name = self.resolve_class_name(source)
            self._write(self.pipeline.format(LogRecord(message, level, class_name)))

            if context.sandbox_mode and sandbox_warning:
                self._write(self.pipeline.sandbox_warning())

    def resolve_class_name(self, source: Any) -> Optional[str]:
        """
        Nome exibido para uma origem.

        Usa a tradução registrada no contexto; sem tradução, usa o caminho
        cru apenas se ``include_untranslated_class_name`` estiver ativo.
        """
        path = source_of(source)
        if path is None:
            return None
        class_name = self.context.class_name(path)
        if class_name is None and self.include_untranslated_class_name:
            class_name = path
        return class_name

    def print_stack_trace(self, exc: BaseException) -> None:
        """Envia o stack trace direto ao writer, sem formatação."""
        self.pipeline.write_stack_trace(exc)

    def bind(self, source: Any) -> BoundLogger:
        """Retorna um logger derivado com origem fixa."""
        return BoundLogger(self, source)

    def _write(self, result: FormatResult) -> None:
        if isinstance(result, Text):
            self.pipeline.write(result.value)

    def __repr__(self) -> str:
        return (
            f"Logger(pipeline={self.pipeline.__class__.__name__}, "
            f"default_level={self.default_level.name}, logged={self._has_logged_before})"
        )


class BoundLogger(LevelMethodsMixin):
    """
    Logger com origem fixa.

    Wrapper que repassa todas as chamadas ao logger (ou façade) pai
    com a mesma ``source``.
    """

    def __init__(self, parent: Any, source: Any):
        """
        Inicializa o logger com origem.

        Args:
            parent: Logger ou façade Log
            source: Origem aplicada a todas as mensagens
        """
        self.parent = parent
        self.source = source_of(source)

    def log(self, message: str, level: Optional[Level] = None,
            sandbox_warning: Optional[bool] = None, *, source: Any = None) -> None:
        """Registra mensagem com a origem fixa (ou a origem informada)."""
        self.parent.log(message, level, sandbox_warning, source=source if source is not None else self.source)

    def print_stack_trace(self, exc: BaseException) -> None:
        self.parent.print_stack_trace(exc)

    def bind(self, source: Any) -> BoundLogger:
        return BoundLogger(self.parent, source)

    def __repr__(self) -> str:
        return f"BoundLogger(source={self.source!r})"


__all__ = [
    "FormatterAndWriter",
    "FormatterWriterPair",
    "LevelMethodsMixin",
    "Logger",
    "BoundLogger",
]
