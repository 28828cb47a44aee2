"""Cyclopts CLI entrypoint for rendering a link-in-bio page.

The ``linkpage`` console script defined here runs the rendering pipeline once:
it fetches ``content/data.json`` (or the configured document), validates it,
resolves the theme stylesheet, and writes the resulting page to
``public/index.html``. Settings come from ``linkpage.yaml`` when present, and
command-line flags or ``LINKPAGE_*`` environment variables override them.

Examples
--------
Render with the defaults from ``linkpage.yaml``:

>>> from linkpage.cli import main
>>> main()  # doctest: +SKIP

Render a remote document into a custom file:

>>> from linkpage.cli import app
>>> app.run(
...     [
...         "render",
...         "--config",
...         "https://example.com/content/data.json",
...         "--output",
...         "dist/index.html",
...     ]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import BuildSettings, ValidationPolicy, load_build_settings
from .page import LinkPageBuilder
from .pipeline import LinkPagePipeline
from .state import PresentationState

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="linkpage", config=cyclopts.config.Env("LINKPAGE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )


def _apply_overrides(
    settings: BuildSettings,
    *,
    site_root: str | None,
    config: str | None,
    output: Path | None,
    lenient: bool,
) -> BuildSettings:
    """Return ``settings`` with any command-line overrides applied."""
    return dc.replace(
        settings,
        site_root=site_root or settings.site_root,
        config=config or settings.config,
        output=output or settings.output,
        policy=ValidationPolicy.LENIENT if lenient else settings.policy,
    )


@app.command(help="Render the link page from its JSON configuration.")
def render(
    *,
    settings: typ.Annotated[
        Path | None,
        Parameter(help="Path to linkpage.yaml", env_var="LINKPAGE_SETTINGS"),
    ] = None,
    site_root: typ.Annotated[
        str | None,
        Parameter(
            help="Directory or base URL holding styles/ and content/",
            env_var="LINKPAGE_SITE_ROOT",
        ),
    ] = None,
    config: typ.Annotated[
        str | None,
        Parameter(
            help="Path or URL of the JSON document", env_var="LINKPAGE_CONFIG"
        ),
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Where to write the HTML page", env_var="LINKPAGE_OUTPUT"),
    ] = None,
    lenient: typ.Annotated[
        bool,
        Parameter(help="Accept documents without profile or links sections"),
    ] = False,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render the link page and write it to disk.

    Parameters
    ----------
    settings : Path or None, optional
        Build settings file; ``linkpage.yaml`` in the working directory is used
        when present and ``None`` is given.
    site_root : str or None, optional
        Override the site root the document and ``styles/`` resolve against.
    config : str or None, optional
        Override the JSON document location.
    output : Path or None, optional
        Override the HTML output path.
    lenient : bool, optional
        Switch validation to ``ValidationPolicy.LENIENT``.
    verbose : bool, optional
        Log at DEBUG instead of WARNING.

    Returns
    -------
    None
        Writes the page (content or error surface) and prints its path.

    Raises
    ------
    SystemExit
        With status 1 after writing the error page when the pipeline failed.
    """
    _configure_logging(verbose=verbose)
    build_settings = _apply_overrides(
        load_build_settings(settings),
        site_root=site_root,
        config=config,
        output=output,
        lenient=lenient,
    )
    result = LinkPagePipeline(build_settings).run()
    written = LinkPageBuilder(result.surface, output=build_settings.output).run()
    print(f"wrote {_format_path(written)}")
    if result.state is PresentationState.ERROR:
        raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``linkpage`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
