"""Unit tests for the presentation state controller."""

from __future__ import annotations

import pytest

from linkpage.state import (
    InvalidTransitionError,
    PresentationController,
    PresentationState,
)
from linkpage.surface import PageSurface


def test_initial_state_is_loading() -> None:
    """A fresh surface shows only the loading indicator."""
    surface = PageSurface()
    controller = PresentationController(surface)
    assert controller.state is PresentationState.LOADING
    assert (surface.loading_hidden, surface.app_hidden, surface.error_hidden) == (
        False,
        True,
        True,
    )


def test_show_content_reveals_app() -> None:
    """Success hides loading and reveals the content container."""
    surface = PageSurface()
    controller = PresentationController(surface)
    controller.show_content()
    assert controller.state is PresentationState.CONTENT
    assert surface.loading_hidden and not surface.app_hidden and surface.error_hidden


def test_show_error_reveals_message_verbatim() -> None:
    """Failure hides loading and content and shows the message as given."""
    surface = PageSurface()
    controller = PresentationController(surface)
    controller.show_error("Configuration error: <boom>")
    assert controller.state is PresentationState.ERROR
    assert surface.loading_hidden and surface.app_hidden
    assert not surface.error_hidden
    assert surface.error_message == "Configuration error: <boom>"


@pytest.mark.parametrize("first", ["content", "error"])
def test_terminal_states_do_not_transition(first: str) -> None:
    """Neither terminal state can be left within a run."""
    controller = PresentationController(PageSurface())
    if first == "content":
        controller.show_content()
    else:
        controller.show_error("failed")
    with pytest.raises(InvalidTransitionError):
        controller.show_error("again")
    with pytest.raises(InvalidTransitionError):
        controller.show_content()
