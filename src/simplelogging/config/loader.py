"""
Leitura da configuração de logging.

Um arquivo YAML opcional define modos, nome do programa, traduções de
nomes de classe e loggers; variáveis ``SIMPLELOGGING_*`` sobrescrevem
os modos e o nome do programa.
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import yaml

from simplelogging.constants import DEFAULT_CONFIG_FILENAME
from simplelogging.exceptions import ConfigLoaderException, SimpleLoggingError
from simplelogging.config.models import LogSettings

_logger = logging.getLogger(__name__)


def parse_bool(raw: str) -> bool:
    """``1``, ``true``, ``yes`` e ``on`` (sem diferenciar maiúsculas) são verdadeiros."""
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Variável de ambiente -> (campo de LogSettings, conversor)
ENV_OVERRIDES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "SIMPLELOGGING_DEBUG": ("debug_mode", parse_bool),
    "SIMPLELOGGING_SANDBOX": ("sandbox_mode", parse_bool),
    "SIMPLELOGGING_PROGRAM_NAME": ("program_name", str),
    "SIMPLELOGGING_CONSOLE_ANSI": ("console_ansi", parse_bool),
}


class ConfigLoader:
    """Monta um ``LogSettings`` a partir de YAML e ambiente."""

    DEFAULT_FILENAME = DEFAULT_CONFIG_FILENAME

    @classmethod
    def load(cls, path: Optional[Path | str] = None) -> LogSettings:
        """
        Lê a configuração.

        Valores do ambiente vencem os do arquivo, que vencem os padrões
        dos modelos. Um arquivo inexistente equivale a um arquivo vazio.

        Args:
            path: Arquivo YAML (padrão: ``simplelogging.yaml`` no diretório atual)

        Returns:
            LogSettings: Configuração validada

        Raises:
            ConfigLoaderException: Arquivo ilegível, YAML inválido ou valores inválidos
        """
        source = Path(path) if path else Path(cls.DEFAULT_FILENAME)
        data = cls.apply_env(cls.read_file(source))

        try:
            return LogSettings.from_dict(data)
        except SimpleLoggingError as e:
            raise ConfigLoaderException(
                f"Configuração inválida em {source}: {e.message}", details=e.details, cause=e
            ) from e
        except TypeError as e:
            raise ConfigLoaderException(f"Configuração inválida em {source}: {e}", cause=e) from e

    @staticmethod
    def read_file(path: Path) -> Dict[str, Any]:
        """Conteúdo do YAML como dicionário ({} se o arquivo não existir)."""
        if not path.exists():
            _logger.debug("%s não existe; usando valores padrão", path)
            return {}

        try:
            with open(path, "r", encoding="utf-8") as stream:
                content = yaml.safe_load(stream)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoaderException(f"Falha ao ler {path}: {e}", cause=e) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigLoaderException(
                f"A raiz de {path} precisa ser um mapeamento",
                details={"got": type(content).__name__},
            )

        _logger.debug("Configuração lida de %s", path)
        return content

    @staticmethod
    def apply_env(data: Dict[str, Any]) -> Dict[str, Any]:
        """Nova cópia de ``data`` com os valores das variáveis ``SIMPLELOGGING_*``."""
        result = dict(data)
        for variable, (key, convert) in ENV_OVERRIDES.items():
            raw = os.environ.get(variable)
            if raw is None:
                continue
            result[key] = convert(raw)
            _logger.debug("%s sobrescreve %s", variable, key)
        return result


__all__ = ["ConfigLoader", "ENV_OVERRIDES", "parse_bool"]
