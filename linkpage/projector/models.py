"""Display tree dataclasses produced by the content projector."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class AvatarView:
    """Avatar image source and its alternative text."""

    src: str
    alt: str


@dc.dataclass(frozen=True, slots=True)
class ProfileView:
    """Profile header fields; ``None`` fields are not rendered at all."""

    avatar: AvatarView | None = None
    name: str | None = None
    title: str | None = None
    bio: str | None = None


@dc.dataclass(frozen=True, slots=True)
class LinkView:
    """A single outbound link card.

    Attributes
    ----------
    url : str
        Destination opened in a new browsing context.
    title : str
        Visible card heading.
    aria_label : str
        Accessible label, ``"Visit <title>"``.
    icon : str
        Glyph shown beside the text.
    description : str | None
        Secondary text; omitted from the page when ``None``.
    delay_ms : int
        Staggered reveal delay for the entry animation.
    target : str
        Browsing context for the anchor.
    rel : str
        Link relationship enforcing opener and referrer isolation.
    """

    url: str
    title: str
    aria_label: str
    icon: str
    description: str | None
    delay_ms: int
    target: str
    rel: str


@dc.dataclass(frozen=True, slots=True)
class SocialLinkView:
    """Icon link to a profile on a known social platform."""

    platform: str
    url: str
    icon: str
    aria_label: str
    target: str
    rel: str


@dc.dataclass(frozen=True, slots=True)
class CustomizationView:
    """CSS custom properties and the optional direct page background."""

    variables: dict[str, str] = dc.field(default_factory=dict)
    background: str | None = None


@dc.dataclass(frozen=True, slots=True)
class DisplayTree:
    """Everything the page shows, grouped by section.

    A section is ``None`` when its source field was absent from the
    configuration; the surface leaves the matching container empty.
    """

    profile: ProfileView | None = None
    links: tuple[LinkView, ...] | None = None
    social: tuple[SocialLinkView, ...] | None = None
    customization: CustomizationView | None = None


__all__ = [
    "AvatarView",
    "CustomizationView",
    "DisplayTree",
    "LinkView",
    "ProfileView",
    "SocialLinkView",
]
