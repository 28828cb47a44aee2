"""Loading, content and error visibility for a single pipeline run."""

from __future__ import annotations

import enum
import typing as typ

from .config import LinkPageError

if typ.TYPE_CHECKING:
    from .surface import PageSurface


class InvalidTransitionError(LinkPageError):
    """Raised when a terminal presentation state is asked to change."""


class PresentationState(enum.Enum):
    """Lifecycle of the page: ``LOADING`` until the pipeline settles."""

    LOADING = "loading"
    CONTENT = "content"
    ERROR = "error"


class PresentationController:
    """Toggle surface visibility as the pipeline reaches its outcome.

    ``CONTENT`` and ``ERROR`` are terminal. A failed run stays failed; the
    only way back to ``LOADING`` is a fresh run with a fresh controller.
    """

    def __init__(self, surface: PageSurface) -> None:
        self.surface = surface
        self.state = PresentationState.LOADING

    def show_content(self) -> None:
        """Hide the loading indicator and reveal the content container."""
        self._leave_loading(PresentationState.CONTENT)
        self.surface.loading_hidden = True
        self.surface.app_hidden = False

    def show_error(self, message: str) -> None:
        """Hide loading and content, then reveal ``message`` verbatim."""
        self._leave_loading(PresentationState.ERROR)
        self.surface.loading_hidden = True
        self.surface.app_hidden = True
        self.surface.error_hidden = False
        self.surface.error_message = message

    def _leave_loading(self, target: PresentationState) -> None:
        if self.state is not PresentationState.LOADING:
            msg = (
                f"Cannot move from {self.state.value} to {target.value}; "
                "the page has already settled."
            )
            raise InvalidTransitionError(msg)
        self.state = target


__all__ = ["InvalidTransitionError", "PresentationController", "PresentationState"]
