"""Configuration loading and management for textbench.

Configuration sources are merged in priority order:
    1. Defaults (defined in RunConfig)
    2. Global config (~/.textbench.toml)
    3. Project config (./textbench.toml)
    4. Explicit config file (--config)
    5. Environment variables (TEXTBENCH_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, show_plot=False)
    >>> config.verbosity
    'verbose'
    >>> config.show_plot
    False
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

GLOBAL_CONFIG_NAME = ".textbench.toml"
PROJECT_CONFIG_NAME = "textbench.toml"
ENV_PREFIX = "TEXTBENCH_"


@dataclass(frozen=True)
class RunConfig:
    """Configuration for one batch run.

    Attributes:
        File selection:
            extension: Only files with exactly this suffix are processed
            follow_symlinks: Follow symlinked files and directories

        Text decoding:
            encoding: Codec used to read and write files
            encoding_errors: Codec error handler; the default round-trips any byte

        Reporting:
            show_plot: Hand the throughput series to the plot window
            plot_file: Save the plot as an image instead of (or besides) showing it
            marker_style: Matplotlib format string for the scatter points
            show_file_table: Print the per-file throughput table
            verbosity: Logging verbosity level
            log_file: Also append log records to this file
    """

    # File selection
    extension: str = ".txt"
    follow_symlinks: bool = False

    # Text decoding
    encoding: str = "utf-8"
    encoding_errors: str = "surrogateescape"

    # Reporting
    show_plot: bool = True
    plot_file: Optional[str] = None
    marker_style: str = "bo"
    show_file_table: bool = True
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("extension", "encoding", "encoding_errors", "marker_style", "verbosity"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidConfigError(name, value, "must be a string")
        for name in ("follow_symlinks", "show_plot", "show_file_table"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidConfigError(name, value, "must be true or false")
        for name in ("plot_file", "log_file"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidConfigError(name, value, "must be a file path")

        if not self.extension.startswith(".") or len(self.extension) < 2:
            raise InvalidConfigError("extension", self.extension, "must look like '.txt'")
        if any(sep in self.extension for sep in ("/", "\\")):
            raise InvalidConfigError("extension", self.extension, "must not contain separators")

        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise InvalidConfigError("encoding", self.encoding, str(e))
        try:
            codecs.lookup_error(self.encoding_errors)
        except LookupError as e:
            raise InvalidConfigError("encoding_errors", self.encoding_errors, str(e))

        if not self.marker_style:
            raise InvalidConfigError("marker_style", self.marker_style, "must not be empty")

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


DEFAULT_CONFIG = RunConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> RunConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask files.

    Returns:
        Validated RunConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a
            value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Verbosity boolean flags collapse into the verbosity string
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return RunConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from TEXTBENCH_* environment variables.

    Supported environment variables:
        TEXTBENCH_EXTENSION: str
        TEXTBENCH_FOLLOW_SYMLINKS: bool (true/false/1/0)
        TEXTBENCH_ENCODING: str
        TEXTBENCH_ENCODING_ERRORS: str
        TEXTBENCH_SHOW_PLOT: bool
        TEXTBENCH_PLOT_FILE: str
        TEXTBENCH_MARKER_STYLE: str
        TEXTBENCH_SHOW_FILE_TABLE: bool
        TEXTBENCH_VERBOSITY: quiet/normal/verbose
        TEXTBENCH_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any TEXTBENCH_* vars found.
    """
    type_hints = get_type_hints(RunConfig)

    result: dict[str, Any] = {}

    for field_name in RunConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Args:
        value: Raw string from environment
        type_hint: Type annotation from dataclass

    Returns:
        Parsed value or None if can't parse

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Both a flat layout and a ``[textbench]`` table are accepted.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("textbench")
    if isinstance(section, dict):
        return dict(section)
    return data
