"""Configuration management for the idforge service.

This module handles loading configuration from environment variables and config files,
with sensible defaults for optional values.
"""

import logging
import os
import sys
from types import ModuleType
from typing import Optional
from typing import TypedDict

from idforge.alphabet import validate_alphabet
from idforge.alphabets import URL_ALPHABET, resolve_preset
from idforge.cache import DEFAULT_SIZE
from idforge.errors import MAX_ID_SIZE, Err

# Configure logging
logger = logging.getLogger(__name__)

# Handle tomllib/tomli for Python 3.11+ vs earlier versions
tomllib: ModuleType | None
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None


class _ConfigValues(TypedDict):
    default_alphabet: str
    default_size: int
    max_size: int
    max_batch: int
    listen_port: int


_INT_KEYS = ("default_size", "max_size", "max_batch", "listen_port")


class ConfigError(Exception):
    """Raised when configuration is invalid."""

    pass


class Config:
    """Configuration for the idforge service.

    Configuration is loaded with the following priority:
    1. Environment variables (highest priority)
    2. Configuration file (TOML format)
    3. Default values (lowest priority)

    Optional configuration:
    - default_alphabet: Alphabet literal or preset name (default: "url")
    - default_size: Length of generated IDs (default: 21)
    - max_size: Largest size a request may ask for (default: 1000000)
    - max_batch: Largest number of IDs per request (default: 100)
    - listen_port: Port for HTTP server (default: 8080)
    """

    def __init__(
        self,
        default_alphabet: str = URL_ALPHABET,
        default_size: int = DEFAULT_SIZE,
        max_size: int = MAX_ID_SIZE,
        max_batch: int = 100,
        listen_port: int = 8080,
    ):
        """Initialize configuration with validated values.

        Args:
            default_alphabet: Alphabet used when a request names none
            default_size: Length used when a request names none
            max_size: Ceiling for requested sizes
            max_batch: Ceiling for IDs per request
            listen_port: Port for HTTP server
        """
        self.default_alphabet = default_alphabet
        self.default_size = default_size
        self.max_size = max_size
        self.max_batch = max_batch
        self.listen_port = listen_port

    @classmethod
    def from_env_and_file(cls, config_file: Optional[str] = None) -> "Config":
        """Load configuration from environment variables and optional config file.

        Environment variables take precedence over config file values.

        Environment variables:
        - DEFAULT_ALPHABET: Alphabet literal or preset name
        - DEFAULT_SIZE: Default ID length
        - MAX_SIZE: Ceiling for requested sizes (at most 1000000)
        - MAX_BATCH: Ceiling for IDs per request
        - LISTEN_PORT: HTTP server port

        Args:
            config_file: Path to TOML config file (optional)

        Returns:
            Config instance with loaded values

        Raises:
            ConfigError: If configuration is invalid
        """
        config_values: _ConfigValues = {
            "default_alphabet": URL_ALPHABET,
            "default_size": DEFAULT_SIZE,
            "max_size": MAX_ID_SIZE,
            "max_batch": 100,
            "listen_port": 8080,
        }

        # Load from config file if provided
        if config_file:
            file_config = cls._load_from_file(config_file)
            config_values.update(file_config)

        # Override with environment variables
        if "DEFAULT_ALPHABET" in os.environ:
            config_values["default_alphabet"] = os.environ["DEFAULT_ALPHABET"]
        for key in _INT_KEYS:
            env_name = key.upper()
            if env_name in os.environ:
                try:
                    config_values[key] = int(os.environ[env_name])  # type: ignore[literal-required]
                except ValueError:
                    raise ConfigError(f"Invalid {env_name}: must be an integer")

        config_values["default_alphabet"] = cls._resolve_alphabet(
            config_values["default_alphabet"]
        )
        cls._validate_limits(config_values)

        logger.info(
            f"Configuration loaded: default_size={config_values['default_size']}, "
            f"max_size={config_values['max_size']}, "
            f"max_batch={config_values['max_batch']}, "
            f"listen_port={config_values['listen_port']}"
        )

        return cls(**config_values)

    @staticmethod
    def _load_from_file(config_file: str) -> dict:
        """Load configuration from TOML file.

        Args:
            config_file: Path to TOML config file

        Returns:
            Dictionary of the configuration values present in the file

        Raises:
            ConfigError: If file cannot be read or parsed
        """
        if tomllib is None:
            raise ConfigError(
                "TOML support not available. Install tomli for Python < 3.11"
            )

        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {config_file}")
        except Exception as e:
            raise ConfigError(f"Failed to parse config file: {e}")

        config = {}
        if "default_alphabet" in data:
            if not isinstance(data["default_alphabet"], str):
                raise ConfigError("default_alphabet must be a string")
            config["default_alphabet"] = data["default_alphabet"]
        for key in _INT_KEYS:
            if key in data:
                if isinstance(data[key], bool) or not isinstance(data[key], int):
                    raise ConfigError(f"{key} must be an integer")
                config[key] = data[key]

        return config

    @staticmethod
    def _resolve_alphabet(value: str) -> str:
        """Turn a preset name or literal into a validated alphabet.

        Args:
            value: Preset name (e.g. "base58") or literal alphabet

        Returns:
            The alphabet string

        Raises:
            ConfigError: If the alphabet is invalid
        """
        alphabet = resolve_preset(value) or value
        result = validate_alphabet(alphabet)
        if isinstance(result, Err):
            logger.error(f"Invalid default_alphabet: {result.error}")
            raise ConfigError(f"Invalid default_alphabet: {result.error}")
        return alphabet

    @staticmethod
    def _validate_limits(values: _ConfigValues) -> None:
        """Validate numeric limits.

        Raises:
            ConfigError: If any limit is out of range
        """
        if not (1 <= values["max_size"] <= MAX_ID_SIZE):
            logger.error(f"Invalid max_size: {values['max_size']}")
            raise ConfigError(f"Invalid max_size: must be between 1 and {MAX_ID_SIZE}")

        if not (1 <= values["default_size"] <= values["max_size"]):
            logger.error(f"Invalid default_size: {values['default_size']}")
            raise ConfigError("Invalid default_size: must be between 1 and max_size")

        if values["max_batch"] < 1:
            logger.error(f"Invalid max_batch: {values['max_batch']}")
            raise ConfigError("Invalid max_batch: must be at least 1")

        if not (1 <= values["listen_port"] <= 65535):
            logger.error(f"Invalid listen_port: {values['listen_port']}")
            raise ConfigError("Invalid listen_port: must be between 1 and 65535")

    def __repr__(self) -> str:
        """String representation of configuration."""
        return (
            f"Config(default_alphabet={self.default_alphabet!r}, "
            f"default_size={self.default_size}, "
            f"max_size={self.max_size}, "
            f"max_batch={self.max_batch}, "
            f"listen_port={self.listen_port})"
        )
