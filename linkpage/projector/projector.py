"""Project a validated configuration into a display tree.

Every function here is pure: it reads the configuration mapping and returns
frozen view dataclasses without touching the surface, the filesystem, or the
network. Each sub-projection treats its source field as optional and returns
``None`` when it is absent, so a document that passed the loader's shallow
check still renders whatever subset of fields it carries.

Examples
--------
>>> from linkpage.projector import project
>>> tree = project({"links": [{"url": "https://example.com", "title": "Home"}]})
>>> [link.aria_label for link in tree.links]
['Visit Home']
>>> tree.profile is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import re
import typing as typ

from linkpage._constants import (
    DEFAULT_LINK_ICON,
    FALLBACK_AVATAR_ALT,
    LINK_DELAY_STEP_MS,
    NEW_CONTEXT_REL,
    NEW_CONTEXT_TARGET,
    SOCIAL_PLATFORMS,
)
from linkpage.config.helpers import _is_absent, _optional_str

from .models import (
    AvatarView,
    CustomizationView,
    DisplayTree,
    LinkView,
    ProfileView,
    SocialLinkView,
)

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def project(config: cabc.Mapping[str, typ.Any]) -> DisplayTree:
    """Return the display tree for ``config``."""
    return DisplayTree(
        profile=project_profile(config.get("profile")),
        links=project_links(config.get("links")),
        social=project_social(config.get("social")),
        customization=project_customization(config.get("customization")),
    )


def project_profile(profile: object) -> ProfileView | None:
    """Project the profile header, keeping only the fields that are present."""
    if not isinstance(profile, cabc.Mapping):
        return None
    name = _text(profile.get("name"))
    avatar_src = _text(profile.get("avatar"))
    avatar = None
    if avatar_src:
        alt = f"{name} avatar" if name else FALLBACK_AVATAR_ALT
        avatar = AvatarView(src=avatar_src, alt=alt)
    return ProfileView(
        avatar=avatar,
        name=name,
        title=_text(profile.get("title")),
        bio=_text(profile.get("bio")),
    )


def project_links(links: object) -> tuple[LinkView, ...] | None:
    """Project link cards in input order with a staggered reveal delay.

    Entries that are not objects are skipped; the delay follows the position
    of the emitted card, so it always grows by ``LINK_DELAY_STEP_MS``.
    """
    if not isinstance(links, cabc.Sequence) or isinstance(links, str):
        return None
    entries: list[cabc.Mapping[str, typ.Any]] = []
    for position, entry in enumerate(links):
        if isinstance(entry, cabc.Mapping):
            entries.append(entry)
        else:
            logger.debug(
                "Skipping link entry %d: expected an object, got %s",
                position,
                type(entry).__name__,
            )
    views: list[LinkView] = []
    for index, entry in enumerate(entries):
        title = _text(entry.get("title")) or ""
        views.append(
            LinkView(
                url=_text(entry.get("url")) or "",
                title=title,
                aria_label=f"Visit {title}",
                icon=_text(entry.get("icon")) or DEFAULT_LINK_ICON,
                description=_text(entry.get("description")),
                delay_ms=index * LINK_DELAY_STEP_MS,
                target=NEW_CONTEXT_TARGET,
                rel=NEW_CONTEXT_REL,
            )
        )
    return tuple(views)


def project_social(social: object) -> tuple[SocialLinkView, ...] | None:
    """Project social icons in platform-table order, dropping unknown keys."""
    if not isinstance(social, cabc.Mapping):
        return None
    views: list[SocialLinkView] = []
    for platform, (base_url, icon) in SOCIAL_PLATFORMS.items():
        handle = social.get(platform)
        if _is_absent(handle):
            continue
        views.append(
            SocialLinkView(
                platform=platform,
                url=f"{base_url}{handle}",
                icon=icon,
                aria_label=f"Visit {platform} profile",
                target=NEW_CONTEXT_TARGET,
                rel=NEW_CONTEXT_REL,
            )
        )
    return tuple(views)


def project_customization(customization: object) -> CustomizationView | None:
    """Map style keys to CSS custom properties.

    A ``background`` key is written twice: once as its variable and once as
    the page's direct background.
    """
    if not isinstance(customization, cabc.Mapping):
        return None
    variables: dict[str, str] = {}
    for key, value in customization.items():
        if _is_absent(value):
            continue
        variables[css_variable_name(str(key))] = str(value)
    background = customization.get("background")
    return CustomizationView(
        variables=variables,
        background=None if _is_absent(background) else str(background),
    )


def css_variable_name(key: str) -> str:
    """Return the CSS custom property name for a camelCase style key.

    >>> css_variable_name("accentColor")
    '--accent-color'
    """
    hyphenated = _CAMEL_BOUNDARY.sub(r"\1-\2", key.strip()).replace("_", "-")
    return f"--{hyphenated.lower()}"


def _text(value: object) -> str | None:
    """Return display text for a scalar field, or None when absent."""
    if _is_absent(value):
        return None
    return _optional_str(value)


__all__ = [
    "css_variable_name",
    "project",
    "project_customization",
    "project_links",
    "project_profile",
    "project_social",
]
