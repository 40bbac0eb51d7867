"""
Códigos de escape ANSI usados pelos formatadores.

Cada membro de ``AnsiColor`` pode ser referenciado em templates
através do token ``%ansi:<NOME>%``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from simplelogging.context import LogContext, get_context


class AnsiColor(Enum):
    """Sequências de escape ANSI suportadas."""

    NOCHANGE = ""
    RESET = "\033[0m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    PURPLE = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    ITALIC = "\033[3m"
    ITALIC_OFF = "\033[23m"

    @property
    def escape_code(self) -> str:
        """Sequência de escape crua."""
        return self.value

    @property
    def token(self) -> str:
        """Token de template correspondente, ex: ``%ansi:RED%``."""
        return f"%ansi:{self.name}%"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def for_console(cls, color: AnsiColor, context: Optional[LogContext] = None) -> AnsiColor:
        """
        Cor a usar em texto enviado ao console.

        Retorna ``NOCHANGE`` enquanto ``console_ansi`` estiver desligado.
        """
        context = context if context is not None else get_context()
        return color if context.console_ansi else cls.NOCHANGE


__all__ = ["AnsiColor"]
