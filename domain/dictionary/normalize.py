from typing import Any, Dict, List, Optional

from common.constants import DEFAULT_POS
from domain.deck.schemas.schema import NOT_FOUND_ENTRY, DictionaryEntry

# Conjugation-class markers in Jisho's part-of-speech tags,
# e.g. "Ichidan verb", "Godan verb with 'ru' ending"
_ICHIDAN = "ichidan"
_GODAN = "godan"


def _collect_readings(japanese: List[Dict[str, Any]]) -> List[str]:
    return [j["reading"] for j in japanese if j.get("reading")]


def normalize_pos(parts_of_speech: List[str]) -> str:
    """
    First token of the first tag, lowercased.
    Verbs get their conjugation class when one of the tags names it.
    """
    if not parts_of_speech or not parts_of_speech[0]:
        return DEFAULT_POS

    pos = parts_of_speech[0].split(" ")[0].lower()
    if pos != "verb":
        return pos

    lowered = [tag.lower() for tag in parts_of_speech]
    if any(_ICHIDAN in tag for tag in lowered):
        return "ichidan verb"
    if any(_GODAN in tag for tag in lowered):
        return "godan verb"
    return pos


def normalize_entry(entry: Dict[str, Any]) -> DictionaryEntry:
    """
    Reduce one Jisho entry to definition, primary reading,
    number of extra readings and a coarse part of speech.
    Only the first sense is used.
    """
    readings = _collect_readings(entry.get("japanese") or [])
    main_reading: Optional[str] = readings[0] if readings else None
    extra_readings = len(readings) - 1 if len(readings) > 1 else 0

    senses = entry.get("senses") or []
    first_sense = senses[0] if senses else {}

    definition = "; ".join(first_sense.get("english_definitions") or [])
    part_of_speech = normalize_pos(first_sense.get("parts_of_speech") or [])

    return DictionaryEntry(
        definition=definition,
        reading=main_reading,
        extra_readings=extra_readings,
        part_of_speech=part_of_speech,
    )


def normalize_search_result(payload: Dict[str, Any]) -> DictionaryEntry:
    """
    Normalize a keyword search response; only the first hit counts.
    Raises ValueError when the payload does not look like a search response.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise ValueError("Unexpected dictionary response shape")

    data = payload["data"]
    if not data:
        return NOT_FOUND_ENTRY
    if not isinstance(data[0], dict):
        raise ValueError("Unexpected dictionary entry shape")
    return normalize_entry(data[0])
