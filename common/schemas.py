from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from domain.deck.schemas.schema import AnnotatedWord

OUTPUT_FORMAT = Literal["csv", "text"]


class AnalyzeRequest(BaseModel):
    url: str = ""


class FetchUrlRequest(BaseModel):
    url: str = ""


class FetchUrlResponse(BaseModel):
    content: str


class DictionaryRequest(BaseModel):
    word: str = Field(..., min_length=1)


class ExportRequest(BaseModel):
    output_format: OUTPUT_FORMAT = "csv"
    # None -> export the current run's results
    words: Optional[List[AnnotatedWord]] = None


class StatusResponse(BaseModel):
    tokenizer_ready: bool
    app_version: str
    analyze_version: str
