"""
Estado compartilhado do sistema de logging.

``LogContext`` reúne tudo o que antes era estado global: modos debug e
sandbox, nome do programa, ANSI do console, traduções de nomes de classe
e a lista de loggers registrados. Cada componente recebe o contexto na
construção; ``get_context()`` fornece uma instância de conveniência
válida para todo o processo.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from simplelogging.constants import (
    DEFAULT_CONSOLE_ANSI,
    DEFAULT_DEBUG_MODE,
    DEFAULT_PROGRAM_NAME,
    DEFAULT_SANDBOX_MODE,
    SEED_DEFAULT_LOGGER,
)
from simplelogging.exceptions import InvalidArgumentError
from simplelogging.utils import source_of

if TYPE_CHECKING:
    from simplelogging.logger import Logger


@dataclass
class LogContext:
    """
    Contexto de execução para logs.

    Attributes:
        debug_mode: Libera mensagens DEBUG e stack traces
        sandbox_mode: Indica que ações são simuladas, não executadas
        program_name: Nome usado nos anúncios de modo
        console_ansi: Se o console aceita sequências ANSI
        seed_default_logger: Se a lista de loggers nasce com um logger de console
        class_name_translations: Caminho de origem -> nome exibido
    """

    debug_mode: bool = DEFAULT_DEBUG_MODE
    sandbox_mode: bool = DEFAULT_SANDBOX_MODE
    program_name: str = DEFAULT_PROGRAM_NAME
    console_ansi: bool = DEFAULT_CONSOLE_ANSI
    seed_default_logger: bool = SEED_DEFAULT_LOGGER
    class_name_translations: Dict[str, str] = field(default_factory=dict)
    _loggers: Optional[List[Logger]] = field(default=None, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    # Modos que podem ser sobrescritos temporariamente via scope()
    _SCOPED_FIELDS = ("debug_mode", "sandbox_mode", "program_name", "console_ansi")

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def set_settings(self, sandbox_mode: bool, debug_mode: bool, program_name: str) -> None:
        """Define de uma vez os modos sandbox/debug e o nome do programa."""
        with self._lock:
            self.sandbox_mode = sandbox_mode
            self.debug_mode = debug_mode
            self.program_name = program_name

    # ------------------------------------------------------------------
    # Traduções de nomes de classe
    # ------------------------------------------------------------------

    def register_class_name(self, source: Any, name: str) -> None:
        """
        Registra o nome exibido para uma origem.

        Args:
            source: Caminho pontilhado ou objeto (classe, instância, função, módulo)
            name: Nome exibido nos logs
        """
        path = source_of(source)
        if path is None:
            raise InvalidArgumentError("Origem não pode ser None", details={"name": name})
        with self._lock:
            self.class_name_translations[path] = name

    def class_name(self, source: Any) -> Optional[str]:
        """Nome traduzido para a origem, ou None se não houver tradução."""
        path = source_of(source)
        if path is None:
            return None
        with self._lock:
            return self.class_name_translations.get(path)

    def remove_class_name(self, source: Any) -> None:
        """Remove a tradução de uma origem (ignora origens desconhecidas)."""
        path = source_of(source)
        with self._lock:
            self.class_name_translations.pop(path, None)

    # ------------------------------------------------------------------
    # Loggers registrados
    # ------------------------------------------------------------------

    @property
    def loggers(self) -> List[Logger]:
        """
        Lista de loggers registrados, criada no primeiro acesso.

        Quando ``seed_default_logger`` está ativo, a lista nasce com um
        logger de console padrão.
        """
        with self._lock:
            if self._loggers is None:
                self._loggers = []
                if self.seed_default_logger:
                    from simplelogging.logger import Logger

                    self._loggers.append(Logger.create(context=self))
            return self._loggers

    @loggers.setter
    def loggers(self, loggers: Optional[List[Logger]]) -> None:
        with self._lock:
            self._loggers = list(loggers) if loggers is not None else None

    def add_logger(self, logger: Logger) -> None:
        with self._lock:
            self.loggers.append(logger)

    def remove_logger(self, logger: Logger) -> None:
        with self._lock:
            if logger in self.loggers:
                self.loggers.remove(logger)

    def snapshot_loggers(self) -> List[Logger]:
        """Cópia da lista de loggers, tirada sob o lock."""
        with self._lock:
            return list(self.loggers)

    # ------------------------------------------------------------------
    # Escopo temporário
    # ------------------------------------------------------------------

    @contextmanager
    def scope(self, **kwargs: Any) -> Iterator[LogContext]:
        """
        Context manager para sobrescrever modos temporariamente.

        Args:
            **kwargs: debug_mode, sandbox_mode, program_name e/ou console_ansi

        Yields:
            LogContext: Self com valores temporários
        """
        invalid = set(kwargs) - set(self._SCOPED_FIELDS)
        if invalid:
            raise InvalidArgumentError(
                f"Campos inválidos para escopo: {sorted(invalid)}",
                details={"valid_fields": list(self._SCOPED_FIELDS)},
            )

        with self._lock:
            old_values = {key: getattr(self, key) for key in kwargs}
            for key, value in kwargs.items():
                setattr(self, key, value)

        try:
            yield self
        finally:
            with self._lock:
                for key, value in old_values.items():
                    setattr(self, key, value)

    def __repr__(self) -> str:
        items = [
            f"debug={self.debug_mode}",
            f"sandbox={self.sandbox_mode}",
            f"program={self.program_name!r}",
        ]
        if self.class_name_translations:
            items.append(f"translations={len(self.class_name_translations)}")
        if self._loggers is not None:
            items.append(f"loggers={len(self._loggers)}")
        return f"LogContext({', '.join(items)})"


# Instância global, criada sob demanda
_default_context: Optional[LogContext] = None
_default_lock = threading.Lock()


def get_context() -> LogContext:
    """Obtém o contexto do processo, criando-o no primeiro acesso."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = LogContext()
        return _default_context


def set_context(context: LogContext) -> None:
    """Substitui o contexto do processo."""
    global _default_context
    with _default_lock:
        _default_context = context


def reset_context() -> LogContext:
    """Descarta o contexto do processo e cria um novo com valores padrão."""
    global _default_context
    with _default_lock:
        _default_context = LogContext()
        return _default_context


__all__ = ["LogContext", "get_context", "set_context", "reset_context"]
