"""
Modelos de dados de configuração.

Define a estrutura tipada das configurações usando Dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from simplelogging.constants import (
    DEFAULT_CONSOLE_ANSI,
    DEFAULT_DEBUG_MODE,
    DEFAULT_FILE_ANSI,
    DEFAULT_INCLUDE_UNTRANSLATED_CLASS_NAME,
    DEFAULT_INITIATION_MESSAGE,
    DEFAULT_PROGRAM_NAME,
    DEFAULT_SANDBOX_MODE,
    DEFAULT_SANDBOX_WARNING,
    DEFAULT_STACK_TRACES_ONLY_IN_DEBUG,
    VALID_FORMATTERS,
    VALID_WRITERS,
)
from simplelogging.config.validators import validate_choice, validate_not_empty, validate_type
from simplelogging.exceptions import ValidationException
from simplelogging.levels import get_level


@dataclass
class LoggerSettings:
    """Configuração de um logger (par formatador + writer)."""

    writer: str = "console"
    formatter: str = "default"
    template: Optional[str] = None
    path: Optional[Path] = None
    ansi: bool = DEFAULT_FILE_ANSI
    stack_traces_only_in_debug: bool = DEFAULT_STACK_TRACES_ONLY_IN_DEBUG
    default_level: str = "INFO"
    default_sandbox_warning: bool = DEFAULT_SANDBOX_WARNING
    include_untranslated_class_name: bool = DEFAULT_INCLUDE_UNTRANSLATED_CLASS_NAME
    initiation_message: Optional[str] = DEFAULT_INITIATION_MESSAGE

    def __post_init__(self):
        validate_choice(self.writer, VALID_WRITERS, "writer")
        validate_choice(self.formatter, VALID_FORMATTERS, "formatter")
        if self.template is not None and self.formatter != "template":
            raise ValidationException(
                "template só é usado com formatter: template",
                details={"formatter": self.formatter},
            )
        get_level(self.default_level)

        if self.writer == "file":
            validate_not_empty(self.path, "path")
            self.path = Path(self.path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LoggerSettings:
        validate_type(data, dict, "loggers[]")
        clean = {k: v for k, v in data.items() if k in cls.__annotations__}

        for key in ("writer", "formatter", "template", "default_level", "initiation_message"):
            if key in clean: validate_type(clean[key], str, f"loggers.{key}")
        for key in ("ansi", "stack_traces_only_in_debug", "default_sandbox_warning",
                    "include_untranslated_class_name"):
            if key in clean: validate_type(clean[key], bool, f"loggers.{key}")

        if "path" in clean and clean["path"]:
            clean["path"] = Path(clean["path"])

        return cls(**clean)


@dataclass
class LogSettings:
    """Configuração raiz: modos, nome do programa, traduções e loggers."""

    program_name: str = DEFAULT_PROGRAM_NAME
    debug_mode: bool = DEFAULT_DEBUG_MODE
    sandbox_mode: bool = DEFAULT_SANDBOX_MODE
    console_ansi: bool = DEFAULT_CONSOLE_ANSI
    class_names: Dict[str, str] = field(default_factory=dict)
    loggers: Optional[List[LoggerSettings]] = None

    def __post_init__(self):
        validate_not_empty(self.program_name, "program_name")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LogSettings:
        clean = {k: v for k, v in data.items() if k in cls.__annotations__}

        if "program_name" in clean: validate_type(clean["program_name"], str, "program_name")
        for key in ("debug_mode", "sandbox_mode", "console_ansi"):
            if key in clean: validate_type(clean[key], bool, key)
        if "class_names" in clean:
            validate_type(clean["class_names"], dict, "class_names")
            clean["class_names"] = {str(k): str(v) for k, v in (clean["class_names"] or {}).items()}
        if "loggers" in clean and clean["loggers"] is not None:
            validate_type(clean["loggers"], list, "loggers")
            clean["loggers"] = [
                item if isinstance(item, LoggerSettings) else LoggerSettings.from_dict(item)
                for item in clean["loggers"]
            ]

        return cls(**clean)


__all__ = ["LoggerSettings", "LogSettings"]
