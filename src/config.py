"""Config: load YAML, resolve ${ENV} placeholders, build platform options."""
from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.models import PlatformOptions
from src.platforms import Platform, select_platform

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "config/config.yaml"

# Match ${VAR_NAME} in string values
ENV_PLACEHOLDER_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

OPTION_KEYS = {"executables", "sound_name", "harden_quoting"}


def _resolve_env(raw: str) -> str:
    """Replace ${ENV_VAR} in raw with os.environ values; unknown ones stay as-is."""
    def repl(match: re.Match[str]) -> str:
        key = match.group(1)
        return os.environ.get(key, match.group(0))
    return ENV_PLACEHOLDER_RE.sub(repl, raw)


def _resolve_tree(value: Any) -> Any:
    if isinstance(value, str):
        return _resolve_env(value)
    if isinstance(value, dict):
        return {k: _resolve_tree(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve_tree(v) for v in value]
    return value


def load_config(path: str | Path = DEFAULT_CONFIG) -> dict:
    """Load YAML config from path, after loading .env into the environment."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"config not found: {path}")
    load_dotenv()
    logger.debug("loading config %s", path)
    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError("config: top level must be a mapping")
    return _resolve_tree(config)


def validate_config(config: dict) -> None:
    """Validate platform and options sections; raise ValueError on error."""
    plat = config.get("platform")
    if plat is not None and not isinstance(plat, str):
        raise ValueError("config: platform must be a string")

    options = config.get("options")
    if options is None:
        return
    if not isinstance(options, dict):
        raise ValueError("config: options must be a dict")
    unknown = set(options) - OPTION_KEYS
    if unknown:
        raise ValueError(f"config: unknown options {sorted(unknown)}")

    executables = options.get("executables")
    if executables is not None:
        if not isinstance(executables, dict):
            raise ValueError("config: options.executables must be a dict")
        for name, exe in executables.items():
            if not isinstance(name, str) or not isinstance(exe, str) or not exe:
                raise ValueError(f"config: options.executables['{name}'] must be a non-empty string")
    sound = options.get("sound_name")
    if sound is not None and not isinstance(sound, str):
        raise ValueError("config: options.sound_name must be a string")
    harden = options.get("harden_quoting")
    if harden is not None and not isinstance(harden, bool):
        raise ValueError("config: options.harden_quoting must be true or false")


def options_from_config(config: dict) -> PlatformOptions:
    """Build PlatformOptions from a validated config dict."""
    options = config.get("options") or {}
    kwargs: dict[str, Any] = {}
    if options.get("executables"):
        kwargs["executables"] = dict(options["executables"])
    if options.get("sound_name") is not None:
        kwargs["sound_name"] = options["sound_name"]
    if options.get("harden_quoting") is not None:
        kwargs["harden_quoting"] = options["harden_quoting"]
    return PlatformOptions(**kwargs)


def platform_os(config: dict) -> str | None:
    """OS override from config, or None for the host.

    Empty values and placeholders whose variable is unset count as no override.
    """
    plat = (config.get("platform") or "").strip()
    if not plat or ENV_PLACEHOLDER_RE.search(plat):
        return None
    return plat


def platform_from_config(path: str | Path = DEFAULT_CONFIG) -> Platform:
    """Load, validate and build the platform described by the config file."""
    config = load_config(path)
    validate_config(config)
    return select_platform(platform_os(config), options_from_config(config))
