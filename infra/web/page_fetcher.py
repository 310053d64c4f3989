import logging
from typing import Optional

import requests

from common.constants import MSG_FETCH_FAILED
from common.settings import get_settings
from domain.analysis.errors import PageFetchError
from domain.nlp.content.content_adapter import FetchedPage

logger = logging.getLogger(__name__)

_TEXT_TYPES = ("text/", "application/xhtml+xml", "application/xml")


def _header_charset(content_type: str) -> Optional[str]:
    for param in content_type.split(";")[1:]:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset" and value.strip():
            return value.strip().strip("\"'").lower()
    return None


def _is_text(content_type: str) -> bool:
    # Servers that send no content type are given the benefit of the doubt
    if not content_type:
        return True
    return content_type.split(";")[0].strip().lower().startswith(_TEXT_TYPES)


class RequestsPageFetcher:
    """
    Downloads a page and returns its raw bytes plus the header charset.
    Decoding is left to the content adapter.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        settings = get_settings()
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.headers = {"User-Agent": user_agent or settings.http_user_agent}

    def fetch(self, url: str) -> FetchedPage:
        try:
            res = self.session.get(url, headers=self.headers, timeout=self.timeout)
            res.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Fetching %s failed: %s", url, e)
            raise PageFetchError(MSG_FETCH_FAILED) from e

        content_type = res.headers.get("Content-Type", "")
        if not _is_text(content_type):
            logger.warning("Fetching %s returned non-text %r", url, content_type)
            raise PageFetchError(MSG_FETCH_FAILED)

        logger.info("Fetched %s (%d bytes)", url, len(res.content))
        return FetchedPage(
            content=res.content, encoding=_header_charset(content_type)
        )
