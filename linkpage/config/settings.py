"""Load optional ``linkpage.yaml`` build settings into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import BuildSettings, SettingsError, ValidationPolicy

DEFAULT_SETTINGS_PATH = Path("linkpage.yaml")


def load_build_settings(path: Path | None = None) -> BuildSettings:
    """Load build settings, falling back to defaults when no file exists.

    Parameters
    ----------
    path : Path, optional
        Settings file to read. Defaults to ``linkpage.yaml`` in the working
        directory; a missing default file yields ``BuildSettings()``.

    Returns
    -------
    BuildSettings
        Settings with every omitted key left at its default.

    Raises
    ------
    FileNotFoundError
        If an explicitly requested ``path`` does not exist.
    SettingsError
        If the YAML is not a mapping or a value has the wrong shape.
    """
    target = path or DEFAULT_SETTINGS_PATH
    if not target.exists():
        if path is not None:
            msg = f"Settings file '{target}' not found."
            raise FileNotFoundError(msg)
        return BuildSettings()

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with target.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SettingsError(msg)
    return _build_settings(loaded)


def _build_settings(raw: typ.Mapping[str, typ.Any]) -> BuildSettings:
    """Build a BuildSettings instance from the provided mapping payload."""
    base = BuildSettings()
    return BuildSettings(
        site_root=str(raw.get("site_root", base.site_root)),
        config=str(raw.get("config", base.config)),
        output=Path(raw.get("output", base.output)),
        policy=_parse_policy(raw.get("policy")),
        timeout=_parse_timeout(raw.get("timeout")),
    )


def _parse_policy(value: object) -> ValidationPolicy:
    """Return the validation policy named by ``value``."""
    match value:
        case None:
            return ValidationPolicy.STRICT
        case str() as text:
            try:
                return ValidationPolicy(text.strip().lower())
            except ValueError as exc:
                known = ", ".join(policy.value for policy in ValidationPolicy)
                msg = f"Unknown validation policy '{text}'. Known policies: {known}"
                raise SettingsError(msg) from exc
        case _:
            msg = "Setting 'policy' must be a string."
            raise SettingsError(msg)


def _parse_timeout(value: object) -> float | None:
    """Return a positive timeout in seconds or None."""
    match value:
        case None:
            return None
        case bool():
            msg = "Setting 'timeout' must be a number of seconds."
            raise SettingsError(msg)
        case int() | float() as seconds if seconds > 0:
            return float(seconds)
        case _:
            msg = "Setting 'timeout' must be a positive number of seconds."
            raise SettingsError(msg)


__all__ = ["DEFAULT_SETTINGS_PATH", "load_build_settings"]
