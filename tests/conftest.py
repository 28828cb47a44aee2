"""Shared fixtures for linkpage tests.

The fixtures build a throwaway site tree under ``tmp_path`` with the same
shape the CLI expects (``content/data.json`` plus ``styles/<theme>.css``) so
loader, theme, pipeline, and CLI tests exercise real files instead of mocks
wherever the filesystem is enough.
"""

from __future__ import annotations

import json
import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def sample_config() -> dict[str, typ.Any]:
    """Return a complete link page document."""
    return {
        "theme": "midnight",
        "profile": {
            "name": "Ada Lovelace",
            "title": "Analyst",
            "bio": "Notes on the analytical engine.",
            "avatar": "https://example.invalid/ada.png",
        },
        "links": [
            {
                "url": "https://example.invalid/notes",
                "title": "Notes",
                "description": "Collected sketches",
                "icon": "📝",
            },
            {"url": "https://example.invalid/engine", "title": "Engine"},
            {"url": "https://example.invalid/letters", "title": "Letters"},
        ],
        "social": {
            "github": "ada",
            "twitter": "ada_l",
            "myspace": "ada",
            "youtube": "",
        },
        "customization": {"accentColor": "#ff0000", "background": "#101010"},
    }


@pytest.fixture
def write_site(tmp_path: Path) -> typ.Callable[..., Path]:
    """Return a factory that lays out a site root under ``tmp_path``."""

    def _write(
        document: object | None = None,
        *,
        raw: str | None = None,
        themes: typ.Iterable[str] = ("midnight",),
    ) -> Path:
        root = tmp_path / "site"
        (root / "content").mkdir(parents=True, exist_ok=True)
        (root / "styles").mkdir(parents=True, exist_ok=True)
        for theme in themes:
            (root / "styles" / f"{theme}.css").write_text(
                ":root { --accent-color: #00f; }\n", encoding="utf-8"
            )
        if raw is not None:
            (root / "content" / "data.json").write_text(raw, encoding="utf-8")
        elif document is not None:
            (root / "content" / "data.json").write_text(
                json.dumps(document), encoding="utf-8"
            )
        return root

    return _write
