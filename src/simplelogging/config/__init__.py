"""
Módulo de Configuração do simplelogging.

Este pacote centraliza a leitura de configuração (YAML + variáveis de
ambiente) e a construção de loggers a partir dela. Use ``configure()``
para aplicar uma configuração a um contexto.
"""

from simplelogging.config.models import LoggerSettings, LogSettings
from simplelogging.config.loader import ConfigLoader
from simplelogging.config.builder import build_logger, configure
from simplelogging.exceptions import ConfigLoaderException, ValidationException

__all__ = [
    "LoggerSettings",
    "LogSettings",
    "ConfigLoader",
    "ConfigLoaderException",
    "ValidationException",
    "build_logger",
    "configure",
]
