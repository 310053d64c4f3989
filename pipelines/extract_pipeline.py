import logging

from core.ports import PageIO
from domain.nlp.content.content_adapter import ContentAdapter


def run_extract(url: str, page_io: PageIO, adapter: ContentAdapter) -> str:
    """
    Fetch a page and return its visible body text, trimmed.
    PageFetchError from the fetcher is passed on unchanged.
    """
    page = page_io.fetch(url)
    content = adapter.extract_text(page.content, page.encoding)
    logging.info(f"Extracted {len(content)} characters from {url}")
    return content
