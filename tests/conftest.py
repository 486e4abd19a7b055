"""Pytest configuration and shared fixtures."""

import asyncio
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from conjuga.models import ConjugationRecord

INDICATIVE_ROWS = [
    ("yo", "{stem}o", "{stem}é", "{stem}aba", "{stem}aría", "{stem}aré"),
    ("tú", "{stem}as", "{stem}aste", "{stem}abas", "{stem}arías", "{stem}arás"),
    ("él/ella/Ud.", "{stem}a", "{stem}ó", "{stem}aba", "{stem}aría", "{stem}ará"),
    ("nosotros", "{stem}amos", "{stem}amos", "{stem}ábamos", "{stem}aríamos", "{stem}aremos"),
    ("vosotros", "{stem}áis", "{stem}asteis", "{stem}abais", "{stem}aríais", "{stem}aréis"),
    ("ellos/ellas/Uds.", "{stem}an", "{stem}aron", "{stem}aban", "{stem}arían", "{stem}arán"),
]


def _row(cells, tag="td"):
    return "<tr>" + "".join(f"<{tag}>{c}</{tag}>" for c in cells) + "</tr>"


def build_verb_page(stem: str) -> str:
    """Render a page shaped like the site's conjugation page for an -ar verb."""
    indicative = [_row(["", "Present", "Preterite", "Imperfect", "Conditional", "Future"])]
    indicative += [
        _row([cells[0]] + [c.format(stem=stem) for c in cells[1:]])
        for cells in INDICATIVE_ROWS
    ]
    subjunctive = [
        _row(["", "Present", "Imperfect"]),
        _row(["yo", f"{stem}e", f"{stem}ara"]),
        _row(["vosotros", f"{stem}éis", f"{stem}arais"]),
    ]
    return (
        "<html><body>"
        '<div class="vtable-header vtable-title">Indicative</div>\n'
        '<div class="vtable-wrapper"><table><tbody>'
        + "".join(indicative)
        + "</tbody></table></div>\n"
        '<div class="vtable-header vtable-title">Subjunctive</div>\n'
        '<div class="vtable-wrapper"><table><tbody>'
        + "".join(subjunctive)
        + "</tbody></table></div>"
        "</body></html>"
    )


@pytest.fixture(autouse=True)
def set_test_env(monkeypatch):
    """Set test environment variables for all tests."""
    monkeypatch.setenv("CONJUGA_BASE_URL", "http://test-upstream/conjugate/")
    monkeypatch.setenv("CONJUGA_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("CONJUGA_INCLUDE_VOSOTROS", "false")


@pytest.fixture
def hablar_page():
    return build_verb_page("habl")


@pytest.fixture
def sample_records():
    """Records for 'hablar' as the extractor yields them."""
    return [
        ConjugationRecord(word="hablo", pronoun="yo", tense="present"),
        ConjugationRecord(word="hablé", pronoun="yo", tense="preterite"),
    ]


@pytest.fixture
def mock_upstream(monkeypatch):
    """Mock the upstream site behind httpx.AsyncClient.

    Pages are keyed by verb; `delays` lets a test make some fetches finish late.
    """
    import httpx

    state = {
        "pages": {
            "hablar": build_verb_page("habl"),
            "cantar": build_verb_page("cant"),
            "bailar": build_verb_page("bail"),
        },
        "delays": {},
        "requested": [],
    }

    class MockResponse:
        def __init__(self, text="", status_code=200):
            self.text = text
            self.status_code = status_code

        def raise_for_status(self):
            if self.status_code >= 400:
                raise httpx.HTTPStatusError(
                    "HTTP Error",
                    request=Mock(),
                    response=self,
                )

    class MockAsyncClient:
        def __init__(self, **kwargs):
            state["client_kwargs"] = kwargs

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

        async def get(self, url, **kwargs):
            state["requested"].append(url)
            verb = url.rsplit("/", 1)[-1]
            delay = state["delays"].get(verb)
            if delay:
                await asyncio.sleep(delay)
            if verb in state["pages"]:
                return MockResponse(text=state["pages"][verb])
            return MockResponse(status_code=404)

    monkeypatch.setattr("httpx.AsyncClient", MockAsyncClient)
    return state


@pytest.fixture
def test_client():
    """FastAPI TestClient for integration tests."""
    from conjuga.main import app

    return TestClient(app)
