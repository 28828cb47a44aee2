"""Link page HTML rendering.

This module turns a settled :class:`~linkpage.surface.PageSurface` into the
static ``public/index.html`` artefact. ``LinkPageBuilder`` loads the
``link_page.jinja`` template, injects the surface, and persists the generated
HTML. The template addresses the same anchors the classic page used
(``loading``, ``app``, ``error``, ``error-message``, ``avatar``, ``name``,
``title``, ``bio``, ``links``, ``social``) so theme stylesheets written for
that markup keep working.

Typical usage follows a pipeline run:

>>> from linkpage.config import BuildSettings
>>> from linkpage.pipeline import LinkPagePipeline
>>> result = LinkPagePipeline(BuildSettings()).run()  # doctest: +SKIP
>>> LinkPageBuilder(result.surface, output=Path("public/index.html")).run()  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

if typ.TYPE_CHECKING:
    from .surface import PageSurface


class LinkPageBuilder:
    """Render the link page from a settled presentation surface."""

    def __init__(
        self,
        surface: PageSurface,
        *,
        output: Path,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        surface : PageSurface
            Surface produced by :class:`~linkpage.pipeline.LinkPagePipeline`;
            provides visibility flags, stylesheets, CSS variables, and the
            display tree.
        output : Path
            Destination of the rendered HTML file.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``linkpage/templates``.
        """
        self.surface = surface
        self.output = output
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("link_page.jinja")

    def render(self) -> str:
        """Return the page HTML, always terminated by a newline."""
        context = {
            "surface": self.surface,
            "tree": self.surface.content,
            "root_style": _style_attribute(self.surface.root_variables),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> Path:
        """Render and write the page HTML, returning the output path."""
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(self.render(), encoding="utf-8")
        return self.output


def _style_attribute(variables: typ.Mapping[str, str]) -> str:
    """Serialize CSS custom properties into an inline ``style`` value."""
    return "; ".join(f"{name}: {value}" for name, value in variables.items())


__all__ = ["LinkPageBuilder"]
