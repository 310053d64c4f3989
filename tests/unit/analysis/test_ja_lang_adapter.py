import pytest

from domain.nlp.adapter_factory import AdapterFactory
from domain.nlp.lang.ja.ja_lang_adapter import JALangAdapter


@pytest.fixture(scope="module")
def adapter():
    adapter = JALangAdapter()
    adapter.load()
    return adapter


def test_not_ready_until_loaded():
    adapter = JALangAdapter()

    assert not adapter.ready
    with pytest.raises(RuntimeError):
        adapter.tokenize("日本語")


def test_tokenize_keeps_surface_forms(adapter):
    text = "日本語の新聞を読みました。"

    tokens = adapter.tokenize(text)
    forms = adapter.surface_forms(tokens)

    assert "".join(forms) == text
    assert "日本語" in forms
    assert "新聞" in forms


def test_romanize(adapter):
    assert adapter.romanize("日本語") == "nihongo"


def test_load_is_idempotent(adapter):
    adapter.load()

    assert adapter.ready


def test_factory():
    assert isinstance(AdapterFactory.create_lang_adapter("ja"), JALangAdapter)
    with pytest.raises(ValueError):
        AdapterFactory.create_lang_adapter("sv")
