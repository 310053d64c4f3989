from abc import ABC, abstractmethod
from typing import List

from domain.nlp.lexicon.schema import NLPToken


class LangAdapter(ABC):
    code: str

    # --------------------- 1) Lifecycle -------------------
    @property
    @abstractmethod
    def ready(self) -> bool:
        """True once the analyzer is loaded and tokenize() can be called."""
        raise NotImplementedError

    @abstractmethod
    def load(self) -> None:
        """
        Build the analyzer. Dictionary loading can take a few seconds,
        so callers may run this in the background.
        """
        raise NotImplementedError

    # --------------------- 2) NLP -------------------
    @abstractmethod
    def tokenize(self, text: str) -> List[NLPToken]:
        """
        Split raw text into tokens, keeping surface forms exactly as written.
        """
        raise NotImplementedError

    @abstractmethod
    def romanize(self, text: str) -> str:
        """
        Algorithmic reading used when the dictionary has none.
        """
        raise NotImplementedError

    @staticmethod
    def surface_forms(tokens: List[NLPToken]) -> List[str]:
        return [token.form for token in tokens]
