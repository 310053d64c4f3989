from common.constants import FILE_TYPE_HTML, LANG_JA
from common.settings import Settings, get_settings
from core.ports import DictionaryIO, PageIO, RunIO
from domain.nlp.adapter_factory import AdapterFactory
from domain.nlp.content.content_adapter import ContentAdapter
from domain.nlp.lang.lang_adapter import LangAdapter
from infra.jisho.jisho_client import JishoDictionary
from infra.memory.run_repo import InMemoryRunIO
from infra.web.page_fetcher import RequestsPageFetcher

# One of each per process; routes get them through Depends so tests can override
lang_adapter = AdapterFactory.create_lang_adapter(LANG_JA)
content_adapter = AdapterFactory.create_content_adapter(FILE_TYPE_HTML)
run_io = InMemoryRunIO()
page_io = RequestsPageFetcher()
dictionary = JishoDictionary()


def get_lang_adapter() -> LangAdapter:
    return lang_adapter


def get_content_adapter() -> ContentAdapter:
    return content_adapter


def get_run_io() -> RunIO:
    return run_io


def get_page_io() -> PageIO:
    return page_io


def get_dictionary() -> DictionaryIO:
    return dictionary


def get_app_settings() -> Settings:
    return get_settings()
