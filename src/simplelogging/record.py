"""Registro de log construído a cada chamada e descartado após a formatação."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from simplelogging.levels import Level


@dataclass(frozen=True)
class LogRecord:
    message: str
    level: Level
    class_name: Optional[str] = None


__all__ = ["LogRecord"]
