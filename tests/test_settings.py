"""Unit tests for ``linkpage.yaml`` build settings."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from linkpage.config import (
    BuildSettings,
    SettingsError,
    ValidationPolicy,
    load_build_settings,
)


def test_missing_default_file_yields_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without linkpage.yaml the defaults apply."""
    monkeypatch.chdir(tmp_path)
    settings = load_build_settings()
    assert settings == BuildSettings()
    assert settings.policy is ValidationPolicy.STRICT
    assert settings.timeout is None


def test_explicit_missing_file_raises(tmp_path: Path) -> None:
    """An explicitly requested settings file must exist."""
    with pytest.raises(FileNotFoundError):
        load_build_settings(tmp_path / "linkpage.yaml")


def test_settings_file_overrides_defaults(tmp_path: Path) -> None:
    """Every documented key should be read from YAML."""
    path = tmp_path / "linkpage.yaml"
    path.write_text(
        dedent(
            """
            site_root: site
            config: https://example.invalid/data.json
            output: dist/index.html
            policy: Lenient
            timeout: 10
            """
        ).lstrip(),
        encoding="utf-8",
    )
    settings = load_build_settings(path)
    assert settings.site_root == "site"
    assert settings.config == "https://example.invalid/data.json"
    assert settings.output == Path("dist/index.html")
    assert settings.policy is ValidationPolicy.LENIENT
    assert settings.timeout == 10.0


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("- site\n", "must be a mapping"),
        ("policy: relaxed\n", "Unknown validation policy"),
        ("timeout: -1\n", "positive number"),
        ("timeout: true\n", "number of seconds"),
    ],
)
def test_invalid_settings_raise(tmp_path: Path, body: str, message: str) -> None:
    """Malformed settings should raise SettingsError with a clear message."""
    path = tmp_path / "linkpage.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(SettingsError, match=message):
        load_build_settings(path)
