from enum import Enum

from pydantic import BaseModel, ConfigDict


class OutputFormat(str, Enum):
    RECORDS = "records"
    FLASHCARDS = "flashcards"
    CSV = "csv"


class ConjugationRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    pronoun: str
    tense: str


class FlashcardRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    definition: str


class ConjugateRequest(BaseModel):
    verbs: list[str]
    mood: str
    include_vosotros: bool = False
    output: OutputFormat = OutputFormat.RECORDS
