# uvicorn - server to post and run
# uvicorn api.app:app --reload
import logging
import threading
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse

from api.dependencies import lang_adapter
from api.routers.analysis import router as analysis_router
from api.routers.lookup import router as lookup_router
from common.logging import setup_logging
from common.settings import get_settings
from core.versions import APP_VERSION

STATIC_DIR = Path(__file__).parent / "static"


def _load_tokenizer() -> None:
    try:
        lang_adapter.load()
    except Exception:
        logging.exception("Failed to load tokenizer")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Dictionary load takes a few seconds; submissions are rejected until it is done
    threading.Thread(target=_load_tokenizer, name="tokenizer-loader", daemon=True).start()
    yield


setup_logging(get_settings().log_level)

app = FastAPI(title="Kanji word list", version=APP_VERSION, lifespan=lifespan)

app.include_router(analysis_router)
app.include_router(lookup_router)


@app.get("/", include_in_schema=False)
def index():
    return FileResponse(STATIC_DIR / "index.html")
