"""Typed models and errors describing link page configuration and build settings."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path

from linkpage._constants import DEFAULT_CONFIG_LOCATION, DEFAULT_OUTPUT

CONFIG_ERROR_PREFIX = "Configuration error"


class LinkPageError(RuntimeError):
    """Base class for errors raised while building a link page."""


class ConfigError(LinkPageError):
    """Raised when the configuration document cannot be used.

    The message always carries the ``Configuration error: `` prefix so the
    error surface shows a stable lead-in regardless of the underlying cause.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{CONFIG_ERROR_PREFIX}: {detail}")


class ConfigFetchError(ConfigError):
    """Raised when the configuration document cannot be retrieved.

    Attributes
    ----------
    status : int | None
        HTTP status code of the failed response, or ``None`` when the transport
        failed before any response arrived.
    reason : str
        Status text or transport error description.
    """

    def __init__(self, status: int | None, reason: str) -> None:
        self.status = status
        self.reason = reason
        if status is None:
            detail = f"Failed to load configuration: {reason}"
        else:
            detail = f"Failed to load configuration: {status} {reason}".rstrip()
        super().__init__(detail)


class ConfigValidationError(ConfigError):
    """Raised when the configuration parses but is empty or structurally invalid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")


class SettingsError(ValueError):
    """Raised when the ``linkpage.yaml`` build settings are invalid."""


class ValidationPolicy(enum.Enum):
    """Declare which top-level sections the loader insists on.

    ``STRICT`` mirrors the classic renderer and rejects documents without a
    ``profile`` or ``links`` section. ``LENIENT`` only requires a non-empty
    mapping; absent sections render as empty.
    """

    STRICT = "strict"
    LENIENT = "lenient"

    @property
    def required_sections(self) -> tuple[str, ...]:
        """Return the top-level keys a document must carry under this policy."""
        if self is ValidationPolicy.STRICT:
            return ("profile", "links")
        return ()


@dc.dataclass(slots=True)
class BuildSettings:
    """Resolved inputs for a single link page build.

    Attributes
    ----------
    site_root : str
        Directory (or base URL) that holds ``styles/`` and the content folder.
    config : str
        Location of the JSON document; relative paths resolve against
        ``site_root``. URLs are fetched over HTTP.
    output : Path
        Destination of the rendered HTML file.
    policy : ValidationPolicy
        Required-section policy applied by the loader.
    timeout : float | None
        Optional per-request timeout in seconds; ``None`` waits indefinitely.
    """

    site_root: str = "."
    config: str = DEFAULT_CONFIG_LOCATION
    output: Path = dc.field(default_factory=lambda: Path(DEFAULT_OUTPUT))
    policy: ValidationPolicy = ValidationPolicy.STRICT
    timeout: float | None = None


__all__ = [
    "CONFIG_ERROR_PREFIX",
    "BuildSettings",
    "ConfigError",
    "ConfigFetchError",
    "ConfigValidationError",
    "LinkPageError",
    "SettingsError",
    "ValidationPolicy",
]
