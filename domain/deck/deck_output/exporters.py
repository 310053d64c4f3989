import csv
import io
import logging
from typing import List

from common.constants import CSV_DELIMITER, CSV_HEADER
from common.schemas import ExportRequest
from domain.deck.schemas.schema import AnnotatedWord


def export_words(request: ExportRequest, words: List[AnnotatedWord]) -> bytes:
    if request.output_format == "csv":
        return export_csv(words)
    elif request.output_format == "text":
        return export_text(words).encode("utf-8")
    else:
        raise ValueError(f"Unknown format: {request.output_format}")


def format_word(word: AnnotatedWord) -> str:
    """Clipboard text for one word: headword with reading, POS, definition."""
    return f"{word.surface} ({word.reading})\n{word.part_of_speech}\n{word.definition}"


def export_text(words: List[AnnotatedWord]) -> str:
    """Clipboard text for a list of words, blank line between entries."""
    return "\n\n".join(format_word(word) for word in words)


def export_csv(words: List[AnnotatedWord]) -> bytes:
    """
    Semicolon separated flashcard import.
    Definitions are joined with "; " so those fields get quoted by the writer.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=CSV_DELIMITER, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for word in words:
        writer.writerow(
            [word.surface, word.reading, word.part_of_speech, word.definition]
        )
    logging.info(f"Exported {len(words)} words to csv")
    return buffer.getvalue().encode("utf-8")
