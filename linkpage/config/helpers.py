"""Utility helpers shared by the linkpage configuration loader and stages."""

from __future__ import annotations

import posixpath
from pathlib import Path

_URL_SCHEMES = ("http://", "https://")


def _is_url(location: str | Path) -> bool:
    """Return True when ``location`` names an HTTP(S) resource."""
    return isinstance(location, str) and location.lower().startswith(_URL_SCHEMES)


def _is_absent(value: object) -> bool:
    """Return True for values the classic renderer treated as missing.

    ``None``, ``False``, ``0`` and ``""`` are absent; empty lists and mappings
    still count as present.
    """
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value == ""
    return False


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_location(site_root: str | Path, location: str | Path) -> str | Path:
    """Resolve ``location`` against ``site_root`` unless it is already absolute."""
    if _is_url(location):
        return location
    if _is_url(site_root):
        root = str(site_root).rstrip("/") + "/"
        return root + posixpath.normpath(str(location)).lstrip("/")
    path = Path(location)
    if path.is_absolute():
        return path
    return Path(site_root) / path


__all__ = ["_is_absent", "_is_url", "_optional_str", "_resolve_location"]
