from abc import ABC, abstractmethod
from typing import Optional, Union

from pydantic import BaseModel

RawContent = Union[bytes, str]


class FetchedPage(BaseModel):
    content: bytes
    encoding: Optional[str] = None  # charset from the Content-Type header, if any


class ContentAdapter(ABC):
    @abstractmethod
    def extract_text(self, raw: RawContent, encoding: Optional[str] = None) -> str:
        """
        Turn a fetched document into the plain visible text to analyze.
        `encoding` is the transport-declared charset and wins when given.
        """
        raise NotImplementedError
