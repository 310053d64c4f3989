from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.dependencies import (
    get_content_adapter,
    get_dictionary,
    get_lang_adapter,
    get_page_io,
    get_run_io,
)
from common.constants import DEFINITION_ERROR, MSG_FETCH_FAILED, MSG_TOKENIZER_NOT_READY
from core.ports import DictionaryIO, PageIO
from domain.analysis.errors import PageFetchError
from domain.deck.schemas.schema import ERROR_ENTRY, DictionaryEntry
from domain.nlp.content.content_adapter import FetchedPage
from domain.nlp.content.html_adapter import HTMLAdapter
from infra.memory.run_repo import InMemoryRunIO
from tests.unit.fakes import FakeDictionary, FakeLangAdapter

URL = "https://www3.nhk.or.jp/news"


@pytest.fixture
def page_io():
    page_io = MagicMock(spec=PageIO)
    page_io.fetch.return_value = FetchedPage(
        content="<body>天気 日本語 天気 ひらがな</body>".encode("utf-8")
    )
    return page_io


@pytest.fixture
def lang():
    return FakeLangAdapter()


@pytest.fixture
def run_io():
    return InMemoryRunIO()


@pytest.fixture
def dictionary():
    return FakeDictionary()


@pytest.fixture
def client(page_io, lang, run_io, dictionary):
    app.dependency_overrides[get_page_io] = lambda: page_io
    app.dependency_overrides[get_lang_adapter] = lambda: lang
    app.dependency_overrides[get_run_io] = lambda: run_io
    app.dependency_overrides[get_dictionary] = lambda: dictionary
    app.dependency_overrides[get_content_adapter] = lambda: HTMLAdapter()
    # No "with": the lifespan (real tokenizer load) is not started
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_index_served(client):
    res = client.get("/")

    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]


def test_status(client, lang):
    lang._ready = False

    body = client.get("/api/status").json()

    assert body["tokenizer_ready"] is False
    assert body["app_version"]


def test_analyze_success(client):
    res = client.post("/api/analyze", json={"url": URL})

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "success"
    assert [w["surface"] for w in body["results"]] == ["天気", "日本語"]
    assert body["results"][0]["count"] == 2
    assert client.get("/api/analysis").json() == body


def test_analyze_empty_url(client, run_io):
    res = client.post("/api/analyze", json={"url": ""})

    assert res.status_code == 400
    assert run_io.get_current().status == "idle"


def test_analyze_tokenizer_not_ready(client, lang):
    lang._ready = False

    res = client.post("/api/analyze", json={"url": URL})

    assert res.status_code == 400
    assert res.json()["detail"] == MSG_TOKENIZER_NOT_READY


def test_analyze_while_loading(client, run_io):
    run_io.begin("https://other.jp")

    res = client.post("/api/analyze", json={"url": URL})

    assert res.status_code == 409


def test_analyze_fetch_failure(client, page_io):
    page_io.fetch.side_effect = PageFetchError(MSG_FETCH_FAILED)

    body = client.post("/api/analyze", json={"url": URL}).json()

    assert body["status"] == "failed"
    assert body["error"] == {"kind": "transport", "message": MSG_FETCH_FAILED}


def test_analyze_no_results(client, page_io):
    page_io.fetch.return_value = FetchedPage(
        content="<body>ひらがな だけ</body>".encode("utf-8")
    )

    body = client.post("/api/analyze", json={"url": URL}).json()

    assert body["status"] == "no_results"
    assert body["error"]["kind"] == "no_results"


def test_analysis_idle_by_default(client):
    body = client.get("/api/analysis").json()

    assert body["status"] == "idle"
    assert body["results"] == []


def test_export_csv_from_current_run(client):
    client.post("/api/analyze", json={"url": URL})

    res = client.post("/api/export", json={"output_format": "csv"})

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/csv")
    assert 'filename="anki_import.csv"' in res.headers["content-disposition"]
    lines = res.content.decode("utf-8").splitlines()
    assert lines[0] == "Front;Back;Part of Speech;Definition"
    assert lines[1] == "天気;r-天気;noun;def of 天気"


def test_export_text_for_given_words(client):
    word = {
        "surface": "新聞",
        "count": 1,
        "reading": "しんぶん",
        "definition": "newspaper",
        "part_of_speech": "noun",
    }

    res = client.post("/api/export", json={"output_format": "text", "words": [word]})

    assert res.text == "新聞 (しんぶん)\nnoun\nnewspaper"


def test_export_unknown_format(client):
    res = client.post("/api/export", json={"output_format": "xlsx"})

    assert res.status_code == 422


def test_fetch_url(client):
    res = client.post("/api/fetch-url", json={"url": URL})

    assert res.json() == {"content": "天気 日本語 天気 ひらがな"}


def test_fetch_url_failure(client, page_io):
    page_io.fetch.side_effect = PageFetchError(MSG_FETCH_FAILED)

    res = client.post("/api/fetch-url", json={"url": URL})

    assert res.status_code == 502
    assert res.json() == {"detail": MSG_FETCH_FAILED}


def test_dictionary_lookup(client, dictionary):
    dictionary.entries["天気"] = DictionaryEntry(
        definition="weather", reading="てんき", extra_readings=0, part_of_speech="noun"
    )

    res = client.post("/api/dictionary", json={"word": "天気"})

    assert res.json() == {
        "definition": "weather",
        "reading": "てんき",
        "extra_readings": 0,
        "part_of_speech": "noun",
    }


def test_dictionary_lookup_error(client):
    dictionary = MagicMock(spec=DictionaryIO)
    dictionary.lookup.return_value = ERROR_ENTRY
    app.dependency_overrides[get_dictionary] = lambda: dictionary

    res = client.post("/api/dictionary", json={"word": "天気"})

    assert res.status_code == 502
    assert res.json()["definition"] == DEFINITION_ERROR
