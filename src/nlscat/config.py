"""
nlscat Configuration

Loads settings from a YAML file, with environment variables taking
precedence at lookup time (NLSPATH, LC_ALL, LC_MESSAGES, LANG are read each
time a catalog is opened, not cached).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)


# Built-in search path: full locale, language.codeset, then language alone
DEFAULT_NLSPATH = (
    "/usr/share/nls/%L/%N.cat;"
    "/usr/share/nls/%l.%c/%N.cat;"
    "/usr/share/nls/%l/%N.cat"
)
DEFAULT_LOCALE = "C"

CONFIG_ENV_VAR = "NLSCAT_CONFIG"

# Default configuration file locations (checked in order, after $NLSCAT_CONFIG)
CONFIG_SEARCH_PATHS = [
    Path.home() / ".nlscat" / "config.yaml",
]

DEFAULT_CONFIG = {
    "nlspath": DEFAULT_NLSPATH,
    "default_locale": DEFAULT_LOCALE,
}


class NlsConfig:
    """Search path and locale settings for opening catalogs."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self._config: Dict[str, Any] = dict(DEFAULT_CONFIG)
        self._config_path: Optional[Path] = None
        self.environ: Mapping[str, str] = os.environ if environ is None else environ

        self._load_config(config_path)

    def _load_config(self, explicit_path: Optional[Path] = None) -> None:
        """Load configuration from the first YAML file found."""
        if explicit_path:
            search_paths = [Path(explicit_path)]
        else:
            search_paths = list(CONFIG_SEARCH_PATHS)
            if self.environ.get(CONFIG_ENV_VAR):
                search_paths.insert(0, Path(self.environ[CONFIG_ENV_VAR]))

        for config_path in search_paths:
            if config_path.exists():
                try:
                    with open(config_path, 'r', encoding='utf-8') as f:
                        user_config = yaml.safe_load(f) or {}
                    if not isinstance(user_config, dict):
                        raise ValueError("top level must be a mapping")
                except (OSError, ValueError, yaml.YAMLError) as e:
                    logger.warning(f"Failed to load config from {config_path}: {e}")
                    continue
                self._config.update(
                    {k: v for k, v in user_config.items() if k in DEFAULT_CONFIG}
                )
                self._config_path = config_path
                return

    @property
    def config_path(self) -> Optional[Path]:
        """Path to the loaded config file, or None if using defaults."""
        return self._config_path

    @property
    def default_nlspath(self) -> str:
        """Search path used when NLSPATH is not set."""
        return str(self._config["nlspath"])

    @property
    def nlspath(self) -> str:
        """Effective search path template: $NLSPATH if set, else the default."""
        if "NLSPATH" in self.environ:
            return self.environ["NLSPATH"]
        return self.default_nlspath

    @property
    def default_locale(self) -> str:
        """Locale substituted when none is set, or for "POSIX"."""
        return str(self._config["default_locale"])

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as dict."""
        return {
            "nlspath": self.nlspath,
            "default_nlspath": self.default_nlspath,
            "default_locale": self.default_locale,
            "config_file": str(self._config_path) if self._config_path else None,
        }


# Global config instance (lazy-loaded)
_config: Optional[NlsConfig] = None


def get_config(config_path: Optional[Path] = None) -> NlsConfig:
    """Get the global config instance, loading if needed."""
    global _config
    if _config is None or config_path is not None:
        _config = NlsConfig(config_path)
    return _config
