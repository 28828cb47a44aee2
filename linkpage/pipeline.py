"""Run the link page pipeline: load, theme, project, present.

The pipeline runs once per build in strict order. It blocks at two I/O points:
the configuration fetch and the theme probe. :class:`LinkPagePipeline` is the
only place that catches stage errors. Any failure while loading, resolving
the theme, or projecting ends the run in ``PresentationState.ERROR`` with the
error's message on the surface. Otherwise the display tree is applied and the
run ends in ``PresentationState.CONTENT``.

Example
-------
>>> from linkpage.config import BuildSettings
>>> from linkpage.pipeline import LinkPagePipeline
>>> result = LinkPagePipeline(BuildSettings(site_root="site")).run()  # doctest: +SKIP
>>> result.state  # doctest: +SKIP
<PresentationState.CONTENT: 'content'>
"""

from __future__ import annotations

import dataclasses as dc
import logging
import time
import typing as typ

import requests

from .config import BuildSettings, load_configuration
from .config.helpers import _resolve_location
from .projector import DisplayTree, project
from .state import PresentationController, PresentationState
from .surface import PageSurface, apply_display_tree
from .theme import ThemeOutcome, ThemeResolver

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class PipelineContext:
    """State threaded through the stages of one run.

    Attributes
    ----------
    settings : BuildSettings
        Inputs of the build.
    surface : PageSurface
        Render target shared by the theme resolver and the controller.
    controller : PresentationController
        Visibility state machine bound to ``surface``.
    config : dict[str, Any] | None
        Loaded configuration; set once the loader succeeds.
    theme_outcome : ThemeOutcome | None
        Result of the theme stage, when it ran.
    tree : DisplayTree | None
        Projected display tree, when projection ran.
    """

    settings: BuildSettings
    surface: PageSurface
    controller: PresentationController
    config: dict[str, typ.Any] | None = None
    theme_outcome: ThemeOutcome | None = None
    tree: DisplayTree | None = None


@dc.dataclass(slots=True)
class PipelineResult:
    """Terminal outcome of a pipeline run."""

    state: PresentationState
    surface: PageSurface
    error: Exception | None = None
    theme_outcome: ThemeOutcome | None = None


class LinkPagePipeline:
    """Drive one link page build from settings to a settled surface."""

    def __init__(
        self,
        settings: BuildSettings,
        *,
        session: requests.Session | None = None,
        theme_resolver: ThemeResolver | None = None,
    ) -> None:
        """Initialize the pipeline.

        Parameters
        ----------
        settings : BuildSettings
            Site root, document location, validation policy, and timeout.
        session : requests.Session, optional
            Shared HTTP session for the configuration fetch and the theme
            probe. Each stage opens and closes its own when omitted.
        theme_resolver : ThemeResolver, optional
            Resolver override; defaults to one rooted at ``settings.site_root``.
        """
        self.settings = settings
        self.session = session
        self.theme_resolver = theme_resolver or ThemeResolver(
            settings.site_root, session=session, timeout=settings.timeout
        )

    def run(self) -> PipelineResult:
        """Execute every stage and return the settled surface."""
        surface = PageSurface()
        context = PipelineContext(
            settings=self.settings,
            surface=surface,
            controller=PresentationController(surface),
        )
        started = time.perf_counter()
        try:
            context.config = self._load(context)
            context.theme_outcome = self.theme_resolver.resolve(
                context.surface, context.config.get("theme")
            )
            context.tree = project(context.config)
        except Exception as exc:  # noqa: BLE001 - single top-level catcher
            logger.error("Failed to initialize link page: %s", exc)
            context.controller.show_error(str(exc))
            return PipelineResult(
                state=context.controller.state,
                surface=surface,
                error=exc,
                theme_outcome=context.theme_outcome,
            )
        apply_display_tree(context.surface, context.tree)
        context.controller.show_content()
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug("Page rendered in %.2fms", elapsed_ms)
        return PipelineResult(
            state=context.controller.state,
            surface=surface,
            theme_outcome=context.theme_outcome,
        )

    def _load(self, context: PipelineContext) -> dict[str, typ.Any]:
        settings = context.settings
        location = _resolve_location(settings.site_root, settings.config)
        return load_configuration(
            location,
            policy=settings.policy,
            session=self.session,
            timeout=settings.timeout,
        )


__all__ = ["LinkPagePipeline", "PipelineContext", "PipelineResult"]
