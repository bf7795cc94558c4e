from __future__ import annotations

"""
Environment Variables Accessor.

Loads key/value pairs from the first matching dotenv file in the base
directory and overlays the process environment on top of them. Values
are returned typed: the type of the supplied default decides how a raw
string is coerced.

File precedence (APP_ENV defaults to 'development'):
    .env.<APP_ENV>.local > .env.<APP_ENV> > .env.local > .env
"""

import math
import os
import re
from typing import ClassVar, Dict, List, Mapping, Optional, Union

from dotenv import dotenv_values

from rotalog.core.logger import Logger
from rotalog.domain.exceptions import ConfigurationError
from rotalog.domain.models import LoggerConfig
from rotalog.infra.logging import get_logger

EnvValue = Union[str, int, float, bool]

APP_ENV_KEY = "APP_ENV"
DEFAULT_APP_ENV = "development"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")

# Plain decimal notation only: no underscores, nan, inf or hex
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

diagnostics = get_logger(__name__)


class EnvironmentVariables:
    """
    Typed read access to environment configuration.

    Attributes:
        env_file: Path of the dotenv file that was loaded, if any.
    """

    _instance: ClassVar[Optional["EnvironmentVariables"]] = None

    def __init__(
            self,
            base_dir: Optional[str] = None,
            *,
            environ: Optional[Mapping[str, str]] = None,
            logger: Optional[Logger] = None,
    ) -> None:
        self._base_dir = os.path.abspath(base_dir or os.getcwd())
        self._environ = os.environ if environ is None else environ
        self._logger = logger
        self.env_file: Optional[str] = None
        self._env: Dict[str, str] = {}
        self._load()

    @classmethod
    def get_instance(cls) -> "EnvironmentVariables":
        """Return the lazily created process-wide accessor."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    # --------------------------------------------------------------------------
    # PUBLIC API
    # --------------------------------------------------------------------------

    def get(self, key: str, default: Optional[EnvValue] = None) -> EnvValue:
        """
        Read a variable, coerced to the type of the default.

        Args:
            key: Variable name.
            default: Returned when the variable is absent. A bool default
                coerces the raw value to bool, an int/float default to a number.

        Returns:
            EnvValue: The typed value.

        Raises:
            ConfigurationError: If the variable is absent without default, or
                the raw value cannot be coerced.
        """
        value = self._env.get(key)

        if value is None:
            if default is not None:
                return default
            raise ConfigurationError(f"Environment variable '{key}' is not defined")

        # bool before int: bool is an int subclass
        if isinstance(default, bool):
            return _parse_bool(key, value)
        if isinstance(default, (int, float)):
            return _parse_number(key, value)
        return value

    def get_required(self, key: str) -> EnvValue:
        """
        Read a variable that must be present, inferring its type from the text.

        Numeric text becomes a number, 'true'/'false' a bool, anything else
        stays a string.

        Raises:
            ConfigurationError: If the variable is absent.
        """
        value = self._env.get(key)
        if value is None:
            raise ConfigurationError(f"Required environment variable '{key}' is not set")

        if _looks_numeric(value):
            return _parse_number(key, value)
        if value.strip().lower() in ("true", "false"):
            return _parse_bool(key, value)
        return value

    def validate_config(self, required_keys: List[str]) -> None:
        """
        Verify that every key is defined.

        Raises:
            ConfigurationError: Listing all missing keys.
        """
        missing = [k for k in required_keys if k not in self._env]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

    def as_dict(self) -> Dict[str, str]:
        return dict(self._env)

    # --------------------------------------------------------------------------
    # PRIVATE HELPERS
    # --------------------------------------------------------------------------

    def _load(self) -> None:
        app_env = self._environ.get(APP_ENV_KEY) or DEFAULT_APP_ENV
        self.env_file = find_env_file(self._base_dir, app_env)

        loaded: Dict[str, str] = {}
        if self.env_file:
            self._get_logger().info(f"Loading environment variables from: {self.env_file}")
            loaded = {k: v for k, v in dotenv_values(self.env_file).items() if v is not None}
        else:
            diagnostics.debug(f"No dotenv file found in {self._base_dir} for '{app_env}'")

        loaded.update(self._environ)
        self._env = loaded

    def _get_logger(self) -> Logger:
        if self._logger is None:
            self._logger = Logger(
                LoggerConfig(context="Environment Variables", log_to_file=True)
            )
        return self._logger


def find_env_file(base_dir: str, app_env: str) -> Optional[str]:
    """
    Locate the highest-precedence dotenv file.

    Args:
        base_dir: Directory searched.
        app_env: Environment name ('development', 'production', ...).

    Returns:
        Optional[str]: Absolute path of the first existing candidate.
    """
    candidates = [
        f".env.{app_env}.local",
        f".env.{app_env}",
        ".env.local",
        ".env",
    ]
    for name in candidates:
        path = os.path.join(base_dir, name)
        if os.path.isfile(path):
            return path
    return None


def get_environment() -> EnvironmentVariables:
    """Module-level shortcut to the shared accessor."""
    return EnvironmentVariables.get_instance()


def _parse_bool(key: str, value: str) -> bool:
    s = value.strip().lower()
    if s in _TRUE_VALUES:
        return True
    if s in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Environment variable '{key}' is not a valid boolean")


def _parse_number(key: str, value: str) -> Union[int, float]:
    s = value.strip()
    if _INT_RE.fullmatch(s):
        return int(s)
    if _FLOAT_RE.fullmatch(s):
        number = float(s)
        if math.isfinite(number):
            return number
    raise ConfigurationError(f"Environment variable '{key}' is not a valid number")


def _looks_numeric(value: str) -> bool:
    s = value.strip()
    if _INT_RE.fullmatch(s):
        return True
    return bool(_FLOAT_RE.fullmatch(s)) and math.isfinite(float(s))
