from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from api.dependencies import get_content_adapter, get_dictionary, get_page_io
from common.constants import DEFINITION_ERROR, MSG_EMPTY_URL
from common.schemas import DictionaryRequest, FetchUrlRequest, FetchUrlResponse
from core.ports import DictionaryIO, PageIO
from domain.analysis.errors import PageFetchError
from domain.deck.schemas.schema import DictionaryEntry
from domain.nlp.content.content_adapter import ContentAdapter
from pipelines.extract_pipeline import run_extract

router = APIRouter(prefix="/api")


@router.post("/fetch-url", response_model=FetchUrlResponse)
def fetch_url(
    request: FetchUrlRequest,
    page_io: PageIO = Depends(get_page_io),
    content_adapter: ContentAdapter = Depends(get_content_adapter),
):
    url = request.url.strip()
    if not url:
        raise HTTPException(status_code=400, detail=MSG_EMPTY_URL)
    try:
        content = run_extract(url, page_io, content_adapter)
    except PageFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return FetchUrlResponse(content=content)


@router.post("/dictionary", response_model=DictionaryEntry)
def lookup_word(
    request: DictionaryRequest, dictionary: DictionaryIO = Depends(get_dictionary)
):
    entry = dictionary.lookup(request.word)
    if entry.definition == DEFINITION_ERROR:
        return JSONResponse(status_code=502, content=entry.model_dump())
    return entry
