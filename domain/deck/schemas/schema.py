from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from common.constants import DEFAULT_POS, DEFINITION_ERROR, DEFINITION_NOT_FOUND


class Candidate(BaseModel):
    surface: str  # surface form, exact string identity
    count: int = Field(..., ge=1)


class DictionaryEntry(BaseModel):
    """
    Normalized first dictionary hit for one word.
    Absence and failure are signalled with fixed definition strings.
    """

    definition: str
    reading: Optional[str] = None
    extra_readings: int = Field(0, ge=0)  # how many further readings were dropped
    part_of_speech: str = DEFAULT_POS

    @property
    def is_sentinel(self) -> bool:
        return self.definition in (DEFINITION_NOT_FOUND, DEFINITION_ERROR)


NOT_FOUND_ENTRY = DictionaryEntry(definition=DEFINITION_NOT_FOUND)
ERROR_ENTRY = DictionaryEntry(
    definition=DEFINITION_ERROR, reading="", extra_readings=0, part_of_speech=DEFAULT_POS
)


# ---------- Study list unit ----------


class AnnotatedWord(BaseModel):
    """
    Candidate merged with its dictionary entry.
    This is what the page renders and what gets exported.
    """

    model_config = ConfigDict(frozen=True)

    surface: str
    count: int = Field(..., ge=1)
    reading: str
    extra_reading_count: int = Field(0, ge=0)
    definition: str
    part_of_speech: str = DEFAULT_POS
