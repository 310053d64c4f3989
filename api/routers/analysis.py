import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from api.dependencies import (
    get_app_settings,
    get_content_adapter,
    get_dictionary,
    get_lang_adapter,
    get_page_io,
    get_run_io,
)
from common.constants import CSV_FILENAME
from common.schemas import AnalyzeRequest, ExportRequest, StatusResponse
from common.settings import Settings
from core.ports import DictionaryIO, PageIO, RunIO
from core.versions import ANALYZE_VERSION, APP_VERSION
from domain.analysis.errors import InputValidationError, RunInProgressError
from domain.analysis.run_state import AnalysisRun
from domain.nlp.content.content_adapter import ContentAdapter
from domain.nlp.lang.lang_adapter import LangAdapter
from pipelines.analysis_pipeline import run_analysis_pipeline
from pipelines.export_deck import run_export_deck

router = APIRouter(prefix="/api")


@router.get("/status", response_model=StatusResponse)
def get_status(lang_adapter: LangAdapter = Depends(get_lang_adapter)):
    return StatusResponse(
        tokenizer_ready=lang_adapter.ready,
        app_version=APP_VERSION,
        analyze_version=ANALYZE_VERSION,
    )


@router.post("/analyze", response_model=AnalysisRun)
def analyze(
    request: AnalyzeRequest,
    page_io: PageIO = Depends(get_page_io),
    content_adapter: ContentAdapter = Depends(get_content_adapter),
    lang_adapter: LangAdapter = Depends(get_lang_adapter),
    dictionary: DictionaryIO = Depends(get_dictionary),
    run_io: RunIO = Depends(get_run_io),
    settings: Settings = Depends(get_app_settings),
):
    logging.info(f"Received analysis request: {request.url!r}")
    try:
        return run_analysis_pipeline(
            request.url,
            page_io,
            content_adapter,
            lang_adapter,
            dictionary,
            run_io,
            pool_size=settings.candidate_pool_size,
            target=settings.target_word_count,
            concurrency=settings.lookup_concurrency,
        )
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RunInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))


# Current run, so a reloaded page can pick up where it was
@router.get("/analysis", response_model=AnalysisRun)
def get_analysis(run_io: RunIO = Depends(get_run_io)):
    return run_io.get_current()


@router.post("/export")
def export(request: ExportRequest, run_io: RunIO = Depends(get_run_io)):
    content = run_export_deck(request, run_io)
    if request.output_format == "csv":
        return Response(
            content=content,
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
        )
    return Response(content=content, media_type="text/plain; charset=utf-8")
