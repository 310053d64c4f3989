from common.constants import FILE_TYPE_HTML, LANG_JA
from domain.nlp.content.content_adapter import ContentAdapter
from domain.nlp.content.html_adapter import HTMLAdapter
from domain.nlp.lang.ja.ja_lang_adapter import JALangAdapter
from domain.nlp.lang.lang_adapter import LangAdapter


class AdapterFactory:
    @staticmethod
    def create_content_adapter(file_type: str) -> ContentAdapter:
        if file_type == FILE_TYPE_HTML:
            return HTMLAdapter()
        else:
            raise ValueError(f"Unsupported file type: {file_type}")

    @staticmethod
    def create_lang_adapter(language: str) -> LangAdapter:
        if language == LANG_JA:
            return JALangAdapter()
        else:
            raise ValueError(f"Unsupported language: {language}")
