"""Fetch and validate the link page JSON document."""

from __future__ import annotations

import json
import typing as typ
from http import HTTPStatus
from pathlib import Path

import requests

from .helpers import _is_absent, _is_url
from .models import ConfigFetchError, ConfigValidationError, ValidationPolicy


def load_configuration(
    location: str | Path,
    *,
    policy: ValidationPolicy = ValidationPolicy.STRICT,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> dict[str, typ.Any]:
    """Fetch the configuration document once and run the shallow validation.

    Parameters
    ----------
    location : str or Path
        ``http(s)://`` URL or filesystem path of the JSON document.
    policy : ValidationPolicy, optional
        Required-section policy. Defaults to ``ValidationPolicy.STRICT``, which
        demands ``profile`` and ``links``.
    session : requests.Session, optional
        Session used for URL fetches. A temporary session is created and
        closed when omitted.
    timeout : float, optional
        Per-request timeout in seconds. ``None`` (the default) waits for the
        server indefinitely.

    Returns
    -------
    dict[str, Any]
        The parsed document, unmodified. No defaults are filled in here.

    Raises
    ------
    ConfigFetchError
        If the transport fails, the server answers with a non-success status,
        or a local file is missing.
    ConfigValidationError
        If the payload is not JSON, is empty, is not a mapping, or lacks a
        section required by ``policy``.

    Examples
    --------
    >>> from linkpage.config import load_configuration
    >>> config = load_configuration("content/data.json")  # doctest: +SKIP
    >>> sorted(config)  # doctest: +SKIP
    ['customization', 'links', 'profile', 'social', 'theme']
    """
    if _is_url(location):
        text = _fetch_remote(str(location), session=session, timeout=timeout)
    else:
        text = _read_local(Path(location))
    return validate_configuration(_parse_document(text), policy=policy)


def validate_configuration(
    document: object, *, policy: ValidationPolicy = ValidationPolicy.STRICT
) -> dict[str, typ.Any]:
    """Return ``document`` when it passes the shallow check for ``policy``."""
    if _is_absent(document) or document in ({}, []):
        msg = "document is empty"
        raise ConfigValidationError(msg)
    if not isinstance(document, dict):
        msg = "top-level JSON value must be an object"
        raise ConfigValidationError(msg)
    missing = [key for key in policy.required_sections if _is_absent(document.get(key))]
    if missing:
        msg = f"missing required fields ({', '.join(missing)})"
        raise ConfigValidationError(msg)
    return document


def _fetch_remote(
    url: str, *, session: requests.Session | None, timeout: float | None
) -> str:
    """Download the document from ``url`` with a single GET request."""
    owns_session = session is None
    active = session or requests.Session()
    try:
        try:
            response = active.get(url, timeout=timeout)
        except requests.RequestException as exc:
            raise ConfigFetchError(None, str(exc)) from exc
        if not response.ok:
            raise ConfigFetchError(response.status_code, response.reason or "")
        return response.text
    finally:
        if owns_session:
            active.close()


def _read_local(path: Path) -> str:
    """Read the document from disk, reporting a missing file like a 404."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        status = HTTPStatus.NOT_FOUND
        raise ConfigFetchError(status.value, status.phrase) from exc
    except OSError as exc:
        raise ConfigFetchError(None, str(exc)) from exc


def _parse_document(text: str) -> object:
    """Decode JSON text, converting syntax errors into validation errors."""
    if not text.strip():
        msg = "document is empty"
        raise ConfigValidationError(msg)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"malformed JSON ({exc.msg} at line {exc.lineno} column {exc.colno})"
        raise ConfigValidationError(msg) from exc


__all__ = ["load_configuration", "validate_configuration"]
