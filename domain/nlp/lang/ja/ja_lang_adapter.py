import logging
import threading
from typing import List, Optional

import pykakasi
from janome.tokenizer import Tokenizer

from common.constants import LANG_JA, MSG_TOKENIZER_NOT_READY
from domain.nlp.lang.lang_adapter import LangAdapter
from domain.nlp.lexicon.schema import NLPToken


class JALangAdapter(LangAdapter):
    code = LANG_JA

    def __init__(self):
        self._lock = threading.Lock()
        self._tokenizer: Optional[Tokenizer] = None
        self._kakasi = None

    @property
    def ready(self) -> bool:
        return self._tokenizer is not None

    def load(self) -> None:
        with self._lock:
            if self._tokenizer is not None:
                return
            kakasi = pykakasi.kakasi()
            tokenizer = Tokenizer()
            self._kakasi = kakasi
            self._tokenizer = tokenizer
        logging.info("Japanese tokenizer loaded.")

    def tokenize(self, text: str) -> List[NLPToken]:
        if self._tokenizer is None:
            raise RuntimeError(MSG_TOKENIZER_NOT_READY)

        tokens = [
            NLPToken(form=token.surface) for token in self._tokenizer.tokenize(text)
        ]
        logging.info(f"Tokenized {len(text)} characters to {len(tokens)} tokens.")
        return tokens

    def romanize(self, text: str) -> str:
        if self._kakasi is None:
            raise RuntimeError(MSG_TOKENIZER_NOT_READY)
        return "".join(item["hepburn"] for item in self._kakasi.convert(text))


if __name__ == "__main__":
    from pprint import pprint

    adapter = JALangAdapter()
    adapter.load()
    pprint(adapter.tokenize("今日は日本語の天気予報を読みました。"))
    print(adapter.romanize("日本語"))
