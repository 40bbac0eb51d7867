"""
Façade ``Log``: ponto único de envio para todos os loggers registrados.

Cada chamada é repassada, em ordem de registro, a todos os loggers do
contexto. Falhas de um logger não são isoladas: a exceção interrompe o
envio aos loggers seguintes e chega ao chamador.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from simplelogging.context import LogContext, get_context
from simplelogging.levels import Level
from simplelogging.logger import BoundLogger, LevelMethodsMixin, Logger


class Log(LevelMethodsMixin):
    """
    Façade de logging sobre um ``LogContext``.

    Sem contexto explícito, a façade acompanha o contexto do processo
    (``get_context()``) a cada chamada.
    """

    def __init__(self, context: Optional[LogContext] = None):
        self._context = context

    @property
    def context(self) -> LogContext:
        return self._context if self._context is not None else get_context()

    # ------------------------------------------------------------------
    # Envio
    # ------------------------------------------------------------------

    def log(self, message: str, level: Optional[Level] = None,
            sandbox_warning: Optional[bool] = None, *, source: Any = None) -> None:
        """
        Envia uma mensagem a todos os loggers registrados.

        Args:
            message: Mensagem
            level: Nível (padrão: nível padrão de cada logger)
            sandbox_warning: Se deve anexar o aviso de sandbox (padrão: valor de cada logger)
            source: Origem da chamada (caminho pontilhado ou objeto)
        """
        for logger in self.context.snapshot_loggers():
            logger.log(message, level, sandbox_warning, source=source)

    def print_stack_trace(self, exc: BaseException) -> None:
        """Envia o stack trace a todos os loggers registrados."""
        for logger in self.context.snapshot_loggers():
            logger.print_stack_trace(exc)

    def bind(self, source: Any) -> BoundLogger:
        """Retorna uma façade derivada com origem fixa."""
        return BoundLogger(self, source)

    # ------------------------------------------------------------------
    # Modos
    # ------------------------------------------------------------------

    @property
    def debug_mode(self) -> bool:
        return self.context.debug_mode

    @debug_mode.setter
    def debug_mode(self, value: bool) -> None:
        self.context.debug_mode = value

    @property
    def sandbox_mode(self) -> bool:
        return self.context.sandbox_mode

    @sandbox_mode.setter
    def sandbox_mode(self, value: bool) -> None:
        self.context.sandbox_mode = value

    @property
    def program_name(self) -> str:
        return self.context.program_name

    @program_name.setter
    def program_name(self, value: str) -> None:
        self.context.program_name = value

    @property
    def console_ansi(self) -> bool:
        return self.context.console_ansi

    @console_ansi.setter
    def console_ansi(self, value: bool) -> None:
        self.context.console_ansi = value

    def set_settings(self, sandbox_mode: bool, debug_mode: bool, program_name: str) -> None:
        self.context.set_settings(sandbox_mode, debug_mode, program_name)

    @contextmanager
    def scope(self, **kwargs: Any) -> Iterator[LogContext]:
        """Sobrescreve modos temporariamente (ver ``LogContext.scope``)."""
        with self.context.scope(**kwargs) as ctx:
            yield ctx

    # ------------------------------------------------------------------
    # Traduções de nomes de classe
    # ------------------------------------------------------------------

    @property
    def class_name_translations(self) -> Dict[str, str]:
        """Cópia da tabela de traduções."""
        with self.context.lock:
            return dict(self.context.class_name_translations)

    def register_class_name(self, source: Any, name: str) -> None:
        self.context.register_class_name(source, name)

    def class_name(self, source: Any) -> Optional[str]:
        return self.context.class_name(source)

    def remove_class_name(self, source: Any) -> None:
        self.context.remove_class_name(source)

    # ------------------------------------------------------------------
    # Loggers registrados
    # ------------------------------------------------------------------

    @property
    def loggers(self) -> List[Logger]:
        return self.context.loggers

    @loggers.setter
    def loggers(self, loggers: Optional[List[Logger]]) -> None:
        self.context.loggers = loggers

    def add_logger(self, logger: Logger) -> None:
        self.context.add_logger(logger)

    def remove_logger(self, logger: Logger) -> None:
        self.context.remove_logger(logger)

    def __repr__(self) -> str:
        return f"Log({self.context!r})"


__all__ = ["Log"]
