"""Global constants for the voiceadmin application."""

DEFAULT_PROVIDER = "aws"
"""Provider used when the configuration does not name one."""

CONFIG_ENV_VAR = "VOICEADMIN_CONFIG"
"""Environment variable holding the path of the YAML configuration file."""

DEFAULT_CONFIG_PATH = "voiceadmin.yaml"
"""Configuration file looked up in the working directory by default."""

DEBUG_ENV_VAR = "VOICEADMIN_DEBUG"
"""Set to '1' to re-raise errors from the CLI instead of printing hints."""

RESPONSE_VERSION = "1.0"
"""Version string of the voice platform response envelope."""

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
