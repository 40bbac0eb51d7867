"""
Formatadores para mensagens de log.

Um formatador transforma um ``LogRecord`` em texto, com ou sem
sequências ANSI. O resultado é sempre um ``FormatResult``: ``Text`` com
a linha pronta ou ``SUPPRESSED`` quando nada deve ser escrito.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Union

from simplelogging.ansi import AnsiColor
from simplelogging.constants import (
    ANNOUNCEMENT_CLASS_NAME,
    DEBUG_DISABLED_MESSAGE,
    DEBUG_ENABLED_MESSAGE,
    DEFAULT_TEMPLATE,
    SANDBOX_DISABLED_MESSAGE,
    SANDBOX_ENABLED_MESSAGE,
    SANDBOX_WARNING_MESSAGE,
)
from simplelogging.context import LogContext, get_context
from simplelogging.exceptions import InvalidArgumentError
from simplelogging.levels import DEBUG, WARNING
from simplelogging.record import LogRecord
from simplelogging.utils import DATE_FORMAT, DATE_TIME_FORMAT, TIME_FORMAT


# ============================================================================
# Resultado de formatação
# ============================================================================

@dataclass(frozen=True)
class Text:
    """Linha formatada, pronta para escrita."""

    value: str

    @property
    def suppressed(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.value


class Suppressed:
    """Sinaliza que a linha não deve ser escrita."""

    _instance: Optional[Suppressed] = None

    def __new__(cls) -> Suppressed:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def suppressed(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "SUPPRESSED"


SUPPRESSED = Suppressed()

FormatResult = Union[Text, Suppressed]


# ============================================================================
# Interface
# ============================================================================

class LogFormatter(ABC):
    """
    Interface base para formatadores de log.

    Define o contrato para formatação de registros e dos anúncios
    emitidos pelo logger (aviso de sandbox e mudanças de modo).
    """

    @abstractmethod
    def format(self, record: LogRecord, ansi: bool) -> FormatResult:
        """
        Formata um registro de log.

        Args:
            record: Registro a formatar
            ansi: Se o destino aceita sequências ANSI

        Returns:
            FormatResult: Texto formatado ou SUPPRESSED
        """
        pass

    @abstractmethod
    def sandbox_warning(self, ansi: bool) -> FormatResult:
        """Aviso escrito após uma mensagem que não foi executada por causa do sandbox."""
        pass

    @abstractmethod
    def startup_sandbox_announcement(self, ansi: bool, enabled: bool) -> FormatResult:
        """Anúncio de entrada (ou saída) do modo sandbox."""
        pass

    @abstractmethod
    def startup_debug_announcement(self, ansi: bool, enabled: bool) -> FormatResult:
        """Anúncio de entrada (ou saída) do modo debug."""
        pass


# ============================================================================
# Implementações
# ============================================================================

class DefaultLogFormatter(LogFormatter):
    """
    Formatador padrão.

    Produz ``[dd.mm.aaaa|HH:MM:SS - NIVEL] > Classe: mensagem``. Mensagens
    DEBUG são suprimidas enquanto o modo debug estiver desligado.
    """

    def __init__(self, context: Optional[LogContext] = None,
                 clock: Callable[[], datetime] = datetime.now):
        """
        Inicializa o formatador.

        Args:
            context: Contexto consultado para modo debug e nome do programa
            clock: Fonte do horário usado no timestamp
        """
        self._context = context
        self.clock = clock

    @property
    def context(self) -> LogContext:
        return self._context if self._context is not None else get_context()

    def is_suppressed(self, record: LogRecord) -> bool:
        """Mensagens DEBUG só passam em modo debug."""
        return record.level.name == DEBUG.name and not self.context.debug_mode

    def format(self, record: LogRecord, ansi: bool) -> FormatResult:
        if self.is_suppressed(record):
            return SUPPRESSED

        timestamp = self.clock().strftime(DATE_TIME_FORMAT)
        level = record.level

        if ansi:
            class_part = ""
            if record.class_name is not None:
                class_part = f"{AnsiColor.ITALIC}{record.class_name}{AnsiColor.ITALIC_OFF}: "
            return Text(
                f"{AnsiColor.WHITE}[{timestamp} - {level.colored_name}{AnsiColor.WHITE}] > "
                f"{level.color}{class_part}{record.message}{AnsiColor.WHITE}"
            )

        class_part = f"{record.class_name}: " if record.class_name is not None else ""
        return Text(f"[{timestamp} - {level.name}] > {class_part}{record.message}")

    def sandbox_warning(self, ansi: bool) -> FormatResult:
        return self._announce(SANDBOX_WARNING_MESSAGE, ansi)

    def startup_sandbox_announcement(self, ansi: bool, enabled: bool) -> FormatResult:
        template = SANDBOX_ENABLED_MESSAGE if enabled else SANDBOX_DISABLED_MESSAGE
        return self._announce(template.format(program=self.context.program_name), ansi)

    def startup_debug_announcement(self, ansi: bool, enabled: bool) -> FormatResult:
        template = DEBUG_ENABLED_MESSAGE if enabled else DEBUG_DISABLED_MESSAGE
        return self._announce(template.format(program=self.context.program_name), ansi)

    def _announce(self, message: str, ansi: bool) -> FormatResult:
        # Anúncios passam pelo format() da subclasse, inclusive templates
        return self.format(LogRecord(message, WARNING, ANNOUNCEMENT_CLASS_NAME), ansi)


class StringLogFormatter(DefaultLogFormatter):
    """
    Formatador baseado em template.

    Tokens suportados: ``%date%``, ``%time%``, ``%classname%``, ``%level%``,
    ``%levelcolor%``, ``%msg%`` e ``%ansi:<COR>%`` para cada ``AnsiColor``.
    Tokens desconhecidos permanecem no texto.

    A substituição é literal e sequencial sobre o resultado acumulado:
    uma mensagem ou nome de classe que contenha um token processado
    depois (ex: ``%ansi:RED%`` dentro de ``%msg%``) também é substituída.
    """

    def __init__(self, template: Optional[str] = DEFAULT_TEMPLATE,
                 context: Optional[LogContext] = None,
                 clock: Callable[[], datetime] = datetime.now):
        """
        Inicializa o formatador.

        Args:
            template: Template com tokens ``%...%``
            context: Contexto consultado para modo debug e nome do programa
            clock: Fonte do horário usado em ``%date%``/``%time%``

        Raises:
            InvalidArgumentError: Se o template for None
        """
        if template is None:
            raise InvalidArgumentError("Template não pode ser None")
        super().__init__(context=context, clock=clock)
        self.template = template

    def format(self, record: LogRecord, ansi: bool) -> FormatResult:
        if self.is_suppressed(record):
            return SUPPRESSED

        now = self.clock()
        result = self.template
        result = result.replace("%date%", now.strftime(DATE_FORMAT))
        result = result.replace("%time%", now.strftime(TIME_FORMAT))
        result = result.replace("%classname%", record.class_name if record.class_name is not None else "")
        result = result.replace("%level%", record.level.name)
        result = result.replace("%levelcolor%", str(record.level.color) if ansi else "")
        result = result.replace("%msg%", str(record.message))

        for color in AnsiColor:
            result = result.replace(color.token, color.escape_code if ansi else "")

        return Text(result)


class FormatterFactory:
    """Factory para criação de formatadores."""

    FORMATTERS = {
        "default": DefaultLogFormatter,
        "template": StringLogFormatter,
    }

    @classmethod
    def create(cls, formatter_type: str, **kwargs) -> LogFormatter:
        """
        Cria um formatador.

        Args:
            formatter_type: Tipo do formatador ("default" ou "template")
            **kwargs: Argumentos para o formatador

        Returns:
            LogFormatter: Instância do formatador

        Raises:
            InvalidArgumentError: Se tipo inválido
        """
        formatter_class = cls.FORMATTERS.get(formatter_type)
        if not formatter_class:
            raise InvalidArgumentError(
                f"Tipo de formatador inválido: {formatter_type}",
                details={"formatter_type": formatter_type},
            )

        return formatter_class(**kwargs)


__all__ = [
    "Text",
    "Suppressed",
    "SUPPRESSED",
    "FormatResult",
    "LogFormatter",
    "DefaultLogFormatter",
    "StringLogFormatter",
    "FormatterFactory",
]
