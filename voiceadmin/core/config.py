import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import InterpolationResolutionError

from voiceadmin.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    DEFAULT_PROVIDER,
    VALID_LOG_LEVELS,
)
from voiceadmin.providers import get_default_region, list_providers
from voiceadmin.providers.aws.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and merge YAML configuration with defaults."""

    def __init__(self) -> None:
        """Initialize ConfigLoader with provider-specific defaults."""
        self.BUILT_IN_DEFAULTS = {
            "provider": DEFAULT_PROVIDER,
            "default_region": get_default_region(DEFAULT_PROVIDER),
            "regions": {},
            "request_timeout": DEFAULT_REQUEST_TIMEOUT_SECONDS,
            "application_id": None,
            "log_level": "INFO",
        }

    def load_config(self, config_path: str | None = None) -> dict[str, Any]:
        """Load configuration from YAML file.

        Parameters
        ----------
        config_path : str | None
            Path to YAML config file. If None, checks VOICEADMIN_CONFIG env var,
            then falls back to voiceadmin.yaml

        Returns
        -------
        dict[str, Any]
            Parsed configuration with all variable interpolations resolved

        Raises
        ------
        omegaconf.errors.InterpolationResolutionError
            If undefined variables are referenced or circular references exist
        """
        if config_path is None:
            config_path = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)

        config_file = Path(config_path)

        if not config_file.exists():
            return {}

        try:
            cfg = OmegaConf.load(config_file)
        except yaml.YAMLError as e:
            logger.error("Failed to parse YAML config file %s: %s", config_file, e)
            raise ValueError(f"Invalid YAML in {config_file}: {e}") from e
        except OSError as e:
            logger.error("Failed to read config file %s: %s", config_file, e)
            raise RuntimeError(f"Failed to read config file {config_file}: {e}") from e

        if cfg is None:
            return {}

        if "vars" in cfg:
            vars_dict = OmegaConf.to_container(cfg.vars, resolve=False)
            for key, value in vars_dict.items():
                if key not in cfg:
                    cfg[key] = value

        try:
            config = OmegaConf.to_container(cfg, resolve=True, throw_on_missing=True)
        except InterpolationResolutionError as e:
            logger.error("Failed to resolve configuration variables: %s", e)
            raise
        except (ValueError, KeyError, AttributeError) as e:
            logger.error("Failed to resolve configuration variables: %s", e)
            raise ValueError(f"Configuration variable resolution error: {e}") from e

        config.pop("vars", None)
        return config

    def get_config(self, config: dict[str, Any] | None = None) -> dict[str, Any]:
        """Merge loaded configuration over the built-in defaults.

        Parameters
        ----------
        config : dict[str, Any] | None
            Configuration from YAML; loaded from the default location if None

        Returns
        -------
        dict[str, Any]
            Merged and validated configuration
        """
        if config is None:
            config = self.load_config()

        merged = copy.deepcopy(self.BUILT_IN_DEFAULTS)
        for key, value in config.items():
            merged[key] = value

        if merged.get("regions") is None:
            merged["regions"] = {}

        self.validate_config(merged)
        return merged

    def validate_config(self, config: dict[str, Any]) -> None:
        """Validate configuration has correct types.

        Parameters
        ----------
        config : dict[str, Any]
            Configuration to validate

        Raises
        ------
        ValueError
            If configuration is invalid
        """
        provider = config.get("provider", DEFAULT_PROVIDER)
        available_providers = list_providers()
        if provider not in available_providers:
            raise ValueError(
                f"Unknown provider: {provider}. Available providers: {available_providers}"
            )

        default_region = config.get("default_region")
        if not isinstance(default_region, str) or not default_region:
            raise ValueError("default_region must be a non-empty string")

        self._validate_regions(config)
        self._validate_timeout(config)

        application_id = config.get("application_id")
        if application_id is not None and not isinstance(application_id, str):
            raise ValueError("application_id must be a string")

        log_level = config.get("log_level", "INFO")
        if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got '{log_level}'"
            )

    def _validate_regions(self, config: dict[str, Any]) -> None:
        regions = config.get("regions", {})

        if not isinstance(regions, dict):
            raise ValueError("regions must be a mapping of spoken name to region id")

        for spoken_name, region_id in regions.items():
            if not isinstance(spoken_name, str) or not isinstance(region_id, str):
                raise ValueError("regions entries must map strings to strings")

    def _validate_timeout(self, config: dict[str, Any]) -> None:
        timeout = config.get("request_timeout")

        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ValueError("request_timeout must be a number")

        if timeout <= 0:
            raise ValueError("request_timeout must be greater than 0")
