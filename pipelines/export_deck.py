from common.schemas import ExportRequest
from core.ports import RunIO
from domain.deck.deck_output.exporters import export_words


def run_export_deck(request: ExportRequest, run_io: RunIO) -> bytes:
    words = request.words
    if words is None:
        words = run_io.get_current().results
    return export_words(request, words)
