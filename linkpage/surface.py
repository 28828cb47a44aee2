"""Presentation surface addressed by the link page's symbolic anchors.

The surface stands in for the browser document: it records which of the
``loading``, ``app`` and ``error`` containers are visible, the error message,
the stylesheets attached to the head, the CSS variables set on the root
element, and the display tree placed in the content container. The Jinja
template in :mod:`linkpage.page` turns it into HTML.
"""

from __future__ import annotations

import dataclasses as dc

from .projector import DisplayTree


@dc.dataclass(slots=True)
class PageSurface:
    """Mutable render target for one pipeline run."""

    stylesheets: list[str] = dc.field(default_factory=list)
    root_variables: dict[str, str] = dc.field(default_factory=dict)
    body_background: str | None = None
    content: DisplayTree | None = None
    loading_hidden: bool = False
    app_hidden: bool = True
    error_hidden: bool = True
    error_message: str = ""

    def has_stylesheet(self, href: str) -> bool:
        """Return True when ``href`` is already attached to the head."""
        return href in self.stylesheets

    def attach_stylesheet(self, href: str) -> None:
        """Append ``href`` to the head unless it is already present."""
        if href not in self.stylesheets:
            self.stylesheets.append(href)


def apply_display_tree(surface: PageSurface, tree: DisplayTree) -> None:
    """Place ``tree`` into the content container and apply its customization."""
    surface.content = tree
    customization = tree.customization
    if customization is None:
        return
    surface.root_variables.update(customization.variables)
    if customization.background is not None:
        surface.body_background = customization.background


__all__ = ["PageSurface", "apply_display_tree"]
