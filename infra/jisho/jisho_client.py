import logging
from typing import Any, Dict, Optional

import requests

from common.settings import get_settings
from domain.deck.schemas.schema import ERROR_ENTRY, DictionaryEntry
from domain.dictionary.normalize import normalize_search_result

logger = logging.getLogger(__name__)


class JishoDictionary:
    """
    Keyword lookups against the Jisho search API.
    Never raises on lookup: failures come back as the error sentinel entry.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        settings = get_settings()
        self.session = session or requests.Session()
        self.base_url = base_url or settings.jisho_api_url
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.headers = {"User-Agent": user_agent or settings.http_user_agent}

    def search(self, word: str) -> Dict[str, Any]:
        res = self.session.get(
            self.base_url,
            params={"keyword": word},
            headers=self.headers,
            timeout=self.timeout,
        )
        res.raise_for_status()
        return res.json()

    def lookup(self, word: str) -> DictionaryEntry:
        try:
            payload = self.search(word)
            entry = normalize_search_result(payload)
        except requests.RequestException as e:
            logger.warning("Dictionary request failed for %r: %s", word, e)
            return ERROR_ENTRY
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # JSON decode errors are ValueErrors too
            logger.warning("Dictionary response unusable for %r: %s", word, e)
            return ERROR_ENTRY

        logger.debug("Looked up %r -> %r", word, entry.definition)
        return entry
