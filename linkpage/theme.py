"""Resolve the theme stylesheet named by the configuration.

A theme is a stylesheet at ``./styles/<theme>.css`` beside the page. The
resolver checks that the file exists (on disk, or with an HTTP ``HEAD`` when
the site root is a URL) and attaches it to the surface once. A missing or
unreachable theme never fails the build: :meth:`ThemeResolver.resolve`
downgrades :class:`ThemeLoadError` to a warning and reports
``ThemeOutcome.FALLBACK`` so the page keeps its baseline styling.

Examples
--------
>>> from linkpage.surface import PageSurface
>>> from linkpage.theme import ThemeResolver
>>> surface = PageSurface()
>>> ThemeResolver("site").resolve(surface, "midnight")  # doctest: +SKIP
<ThemeOutcome.ATTACHED: 'attached'>
>>> surface.stylesheets  # doctest: +SKIP
['./styles/midnight.css']
"""

from __future__ import annotations

import enum
import logging
import typing as typ
from pathlib import Path

import requests

from ._constants import DEFAULT_THEME, THEME_HREF_TEMPLATE
from .config import LinkPageError
from .config.helpers import _is_absent, _is_url, _optional_str, _resolve_location

if typ.TYPE_CHECKING:
    from .surface import PageSurface

logger = logging.getLogger(__name__)


class ThemeLoadError(LinkPageError):
    """Raised internally when a theme stylesheet cannot be loaded."""


class ThemeOutcome(enum.Enum):
    """How a theme request settled; every member lets rendering continue."""

    ATTACHED = "attached"
    ALREADY_ATTACHED = "already_attached"
    FALLBACK = "fallback"


def theme_name(theme: object) -> str:
    """Return the theme name, using the default when absent, falsy or blank."""
    if _is_absent(theme):
        return DEFAULT_THEME
    return _optional_str(theme) or DEFAULT_THEME


def theme_href(theme: object) -> str:
    """Return the stylesheet href for ``theme``, using the default when blank.

    >>> theme_href(None)
    './styles/technicallyweb3.css'
    """
    return THEME_HREF_TEMPLATE.format(theme=theme_name(theme))


class ThemeResolver:
    """Attach theme stylesheets to a surface without ever blocking rendering."""

    def __init__(
        self,
        site_root: str | Path = ".",
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the resolver.

        Parameters
        ----------
        site_root : str or Path, optional
            Directory or base URL the ``./styles`` href is relative to.
        session : requests.Session, optional
            Session used to probe URL site roots; a temporary one is created
            per probe when omitted.
        timeout : float, optional
            Probe timeout in seconds; ``None`` waits indefinitely.
        """
        self.site_root = site_root
        self._session = session
        self.timeout = timeout

    def resolve(self, surface: PageSurface, theme: object = None) -> ThemeOutcome:
        """Attach the stylesheet for ``theme`` to ``surface``.

        Returns ``ALREADY_ATTACHED`` without probing when the href is present,
        ``ATTACHED`` after a successful probe, and ``FALLBACK`` after logging a
        warning when the stylesheet cannot be loaded.
        """
        href = theme_href(theme)
        if surface.has_stylesheet(href):
            return ThemeOutcome.ALREADY_ATTACHED
        try:
            self._probe(href)
        except ThemeLoadError as exc:
            logger.warning(
                "Theme %s not found, using default styling (%s)",
                theme_name(theme),
                exc,
            )
            return ThemeOutcome.FALLBACK
        surface.attach_stylesheet(href)
        return ThemeOutcome.ATTACHED

    def _probe(self, href: str) -> None:
        """Raise ThemeLoadError unless the stylesheet behind ``href`` exists."""
        location = _resolve_location(self.site_root, href)
        if _is_url(location):
            self._probe_remote(str(location))
            return
        path = Path(location)
        try:
            exists = path.is_file()
        except OSError as exc:
            msg = f"stylesheet '{path}' cannot be read: {exc}"
            raise ThemeLoadError(msg) from exc
        if not exists:
            msg = f"stylesheet '{path}' does not exist"
            raise ThemeLoadError(msg)

    def _probe_remote(self, url: str) -> None:
        session = self._session or requests.Session()
        try:
            response = session.head(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as exc:
            msg = f"stylesheet '{url}' is unreachable: {exc}"
            raise ThemeLoadError(msg) from exc
        finally:
            if self._session is None:
                session.close()
        if not response.ok:
            msg = f"stylesheet '{url}' returned {response.status_code}"
            raise ThemeLoadError(msg)


__all__ = [
    "ThemeLoadError",
    "ThemeOutcome",
    "ThemeResolver",
    "theme_href",
    "theme_name",
]
