"""
Níveis de severidade.

Um ``Level`` é uma etiqueta nomeada com prioridade numérica e cor.
Prioridades menores indicam maior severidade, mas nenhum código compara
níveis numericamente: a identidade é dada pelo nome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from simplelogging.ansi import AnsiColor
from simplelogging.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Level:
    """
    Nível de log imutável.

    Attributes:
        name: Nome exibido (ex: "INFO")
        priority: Prioridade numérica
        color: Cor ANSI associada
    """

    name: str
    priority: int
    color: AnsiColor = AnsiColor.WHITE

    @property
    def colored_name(self) -> str:
        """Nome prefixado pela sequência de escape da cor."""
        return f"{self.color}{self.name}"

    def __str__(self) -> str:
        return self.name


FATAL = Level("FATAL", 100, AnsiColor.RED)
ERROR = Level("ERROR", 200, AnsiColor.PURPLE)
WARNING = Level("WARNING", 300, AnsiColor.YELLOW)
INFO = Level("INFO", 400)
DEBUG = Level("DEBUG", 500, AnsiColor.GREEN)

_REGISTRY: Dict[str, Level] = {}


def register_level(level: Level) -> Level:
    """
    Registra um nível para que possa ser resolvido pelo nome.

    Um nível com o mesmo nome (sem diferenciar maiúsculas) é substituído.

    Args:
        level: Nível a registrar

    Returns:
        Level: O próprio nível
    """
    _REGISTRY[level.name.upper()] = level
    return level


def get_level(name: str) -> Level:
    """
    Resolve um nível registrado pelo nome.

    Raises:
        InvalidArgumentError: Se o nome não estiver registrado
    """
    try:
        return _REGISTRY[name.upper()]
    except (KeyError, AttributeError):
        raise InvalidArgumentError(
            f"Nível desconhecido: {name}",
            details={"level": name, "valid_levels": list(_REGISTRY)},
        ) from None


def levels() -> List[Level]:
    """Níveis registrados, na ordem de registro."""
    return list(_REGISTRY.values())


for _level in (FATAL, ERROR, WARNING, INFO, DEBUG):
    register_level(_level)


__all__ = [
    "Level",
    "FATAL",
    "ERROR",
    "WARNING",
    "INFO",
    "DEBUG",
    "register_level",
    "get_level",
    "levels",
]
