"""
Utilitários compartilhados: formatos de data e identificação de origem.

A origem de uma chamada de log é sempre informada explicitamente pelo
chamador (string, classe, instância, função ou módulo) e reduzida aqui
a um caminho pontilhado.
"""

from __future__ import annotations

import inspect
from types import ModuleType
from typing import Any, Optional

# Formatos de data/hora (strftime)
DATE_TIME_FORMAT = "%d.%m.%Y|%H:%M:%S"
DATE_FORMAT = "%d.%m.%Y"
ISO_DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
HOUR_MINUTE_FORMAT = "%H:%M"


def source_of(obj: Any) -> Optional[str]:
    """
    Converte uma origem em caminho pontilhado.

    Args:
        obj: String, classe, instância, função, módulo ou None

    Returns:
        Optional[str]: ``modulo.NomeQualificado``, ``modulo`` ou a própria string
    """
    if obj is None or isinstance(obj, str):
        return obj

    if isinstance(obj, ModuleType):
        return obj.__name__

    target = obj if inspect.isclass(obj) or inspect.isroutine(obj) else type(obj)
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", target.__name__)
    return f"{module}.{qualname}" if module else qualname


__all__ = [
    "DATE_TIME_FORMAT",
    "DATE_FORMAT",
    "ISO_DATE_FORMAT",
    "TIME_FORMAT",
    "HOUR_MINUTE_FORMAT",
    "source_of",
]
