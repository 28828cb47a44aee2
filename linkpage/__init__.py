"""Render a link-in-bio landing page from a declarative JSON document.

This package exposes the ``linkpage`` CLI and the pipeline it drives: load and
validate ``content/data.json``, attach the theme stylesheet, project the
document into a display tree, and write the settled page as static HTML.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``LinkPagePipeline``: Programmatic access to a single pipeline run.
- ``LinkPageBuilder``: Jinja renderer for a settled surface.

Examples
--------
>>> from linkpage import main
>>> main()  # doctest: +SKIP
>>> from linkpage import app
>>> isinstance(app.name[0], str)
True
"""

from __future__ import annotations

from .cli import app, main
from .page import LinkPageBuilder
from .pipeline import LinkPagePipeline

__all__ = ["LinkPageBuilder", "LinkPagePipeline", "app", "main"]
