"""Behaviour tests for rendering a link page end-to-end with pytest-bdd.

These scenarios run ``LinkPagePipeline`` and ``LinkPageBuilder`` together
against a site tree written under ``tmp_path`` and assert on the resulting
HTML through BeautifulSoup. The HTTP scenario stubs ``requests.Session`` so
no live network calls are made.

Usage
-----
Run ``pytest tests/bdd/test_render_page.py -v`` to execute only these
scenarios.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest
import requests
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from linkpage.config import BuildSettings
from linkpage.page import LinkPageBuilder
from linkpage.pipeline import LinkPagePipeline

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "render_page.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@given("a site with a complete document and its theme stylesheet")
def given_complete_site(
    write_site: typ.Callable[..., Path],
    sample_config: dict[str, typ.Any],
    scenario_state: ScenarioState,
) -> None:
    root = write_site(sample_config, themes=("midnight",))
    scenario_state["settings"] = BuildSettings(site_root=str(root))


@given("a site with a complete document but no theme stylesheet")
def given_site_without_theme(
    write_site: typ.Callable[..., Path],
    sample_config: dict[str, typ.Any],
    scenario_state: ScenarioState,
) -> None:
    root = write_site(sample_config, themes=())
    scenario_state["settings"] = BuildSettings(site_root=str(root))


@given("a site whose document returns HTTP 404")
def given_missing_remote_document(
    mocker: MockerFixture, scenario_state: ScenarioState
) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value = mocker.Mock(
        ok=False, status_code=404, reason="Not Found", text=""
    )
    scenario_state["session"] = session
    scenario_state["settings"] = BuildSettings(site_root="https://example.invalid")


@when("I render the link page")
def when_render(
    scenario_state: ScenarioState,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    pipeline = LinkPagePipeline(
        scenario_state["settings"], session=scenario_state.get("session")
    )
    with caplog.at_level(logging.WARNING):
        result = pipeline.run()
    output = LinkPageBuilder(result.surface, output=tmp_path / "index.html").run()
    scenario_state["pipeline"] = pipeline
    scenario_state["result"] = result
    scenario_state["soup"] = BeautifulSoup(
        output.read_text(encoding="utf-8"), "html.parser"
    )
    scenario_state["log"] = caplog.text


def _classes(soup: BeautifulSoup, anchor: str) -> list[str]:
    element = soup.find(id=anchor)
    assert element is not None, f"expected #{anchor} in the page"
    return list(element.get("class") or [])


@then("the page shows the content surface")
def then_content_surface(scenario_state: ScenarioState) -> None:
    soup: BeautifulSoup = scenario_state["soup"]
    assert "hidden" not in _classes(soup, "app")
    assert "hidden" in _classes(soup, "loading")
    assert "hidden" in _classes(soup, "error")


@then("the links appear in document order")
def then_links_in_order(scenario_state: ScenarioState) -> None:
    soup: BeautifulSoup = scenario_state["soup"]
    titles = [node.get_text(strip=True) for node in soup.select("#links .link-title")]
    assert titles == ["Notes", "Engine", "Letters"]


@then("the theme stylesheet is attached once")
def then_theme_attached_once(scenario_state: ScenarioState) -> None:
    soup: BeautifulSoup = scenario_state["soup"]
    hrefs = [node["href"] for node in soup.find_all("link", rel="stylesheet")]
    assert hrefs == ["./styles/midnight.css"]
    surface = scenario_state["result"].surface
    scenario_state["pipeline"].theme_resolver.resolve(surface, "midnight")
    assert surface.stylesheets == ["./styles/midnight.css"]


@then("a theme warning was logged")
def then_theme_warning(scenario_state: ScenarioState) -> None:
    soup: BeautifulSoup = scenario_state["soup"]
    assert soup.find_all("link", rel="stylesheet") == []
    assert "Theme midnight not found, using default styling" in scenario_state["log"]


@then(parsers.parse('the page shows the error surface mentioning "{text}"'))
def then_error_surface(scenario_state: ScenarioState, text: str) -> None:
    soup: BeautifulSoup = scenario_state["soup"]
    assert "hidden" in _classes(soup, "app")
    assert "hidden" not in _classes(soup, "error")
    message = soup.find(id="error-message")
    assert message is not None and text in message.get_text()
