"""
tlsinfo Configuration Management
=================================

Centralized configuration for the tlsinfo command-line front end using
Python dataclasses and TOML-based persistence.

The classification core itself takes no configuration; these settings only
govern how the CLI logs and presents what the core produces.

References:
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

_OUTPUT_FORMATS: frozenset[str] = frozenset({"console", "json"})


# ============================ Sections =====================================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Logging and general operational settings."""

    log_level: str = "WARNING"
    log_file: str = ""  # empty disables file logging
    log_json: bool = False
    debug: bool = False


@dataclass(frozen=False, slots=True)
class DisplayConfig:
    """Presentation settings for the ``describe`` and listing commands.

    ``color`` toggles the ANSI quality colouring of the text encoder;
    ``output_format`` selects between the text block and the structured
    JSON record when the command line does not say otherwise.
    """

    color: bool = True
    output_format: str = "console"
    banner: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class TLSInfoConfig:
    """Master configuration aggregating all settings sections.

    Usage:
        >>> config = TLSInfoConfig.load()                  # from default path
        >>> config = TLSInfoConfig.load("custom.toml")     # from custom path
        >>> print(config.display.output_format)
        'console'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> TLSInfoConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`TLSInfoConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ValueError: If ``display.output_format`` names an unknown format.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        config = cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            display=cls._build_section(DisplayConfig, raw.get("display", {})),
        )
        if config.display.output_format not in _OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output_format {config.display.output_format!r}; "
                f"expected one of {sorted(_OUTPUT_FORMATS)}"
            )
        return config

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)
