"""
Constantes globais do simplelogging.

Centraliza os valores padrão usados por contexto, logger,
formatadores e configuração.
"""

from typing import Set

# ============================================================================
# Contexto
# ============================================================================

DEFAULT_DEBUG_MODE = False
DEFAULT_SANDBOX_MODE = False
DEFAULT_PROGRAM_NAME = "Program"
DEFAULT_CONSOLE_ANSI = False
SEED_DEFAULT_LOGGER = True

# ============================================================================
# Logger
# ============================================================================

DEFAULT_SANDBOX_WARNING = False
DEFAULT_INCLUDE_UNTRANSLATED_CLASS_NAME = False
DEFAULT_INITIATION_MESSAGE = (
    "------------------------------- New Logger Initiation! "
    "Program (re-)start? -------------------------------"
)

# Nome de classe usado nos anúncios emitidos pelo próprio logger
ANNOUNCEMENT_CLASS_NAME = "Logger"

# ============================================================================
# Formatadores
# ============================================================================

DEFAULT_TEMPLATE = (
    "%ansi:WHITE%[%date%|%time% - %levelcolor%%level%%ansi:WHITE%] > "
    "%levelcolor%%ansi:ITALIC%%classname%%ansi:ITALIC_OFF%: %msg%%ansi:WHITE%"
)

SANDBOX_WARNING_MESSAGE = "The last logged action didn't go through, because we are in sandbox mode."
SANDBOX_ENABLED_MESSAGE = "{program} runs in sandbox mode!"
SANDBOX_DISABLED_MESSAGE = "{program} no longer runs in sandbox mode!"
DEBUG_ENABLED_MESSAGE = "{program} runs in debug mode!"
DEBUG_DISABLED_MESSAGE = "{program} no longer runs in debug mode!"

# ============================================================================
# Writers
# ============================================================================

DEFAULT_STACK_TRACES_ONLY_IN_DEBUG = True
DEFAULT_FILE_ANSI = True
DEFAULT_ENCODING = "utf-8"

# ============================================================================
# Configuração
# ============================================================================

DEFAULT_CONFIG_FILENAME = "simplelogging.yaml"
VALID_WRITERS: Set[str] = {"console", "file"}
VALID_FORMATTERS: Set[str] = {"default", "template"}
