import csv
import io
import logging
from collections.abc import Iterable, Mapping

from conjuga.config import DEFAULT_TENSE_PHRASES
from conjuga.models import ConjugationRecord, FlashcardRecord

logger = logging.getLogger(__name__)

DEFINITION_TEMPLATE = "Conjugación del verbo {verb} en {tense_phrase} para {pronoun}"
CSV_HEADER = ("value", "definition")


def tense_phrase(tense: str, phrases: Mapping[str, str] = DEFAULT_TENSE_PHRASES) -> str:
    phrase = phrases.get(tense.lower())
    if phrase is None:
        logger.debug("No phrase for tense %r, using it as is", tense)
        return tense
    return phrase


def to_flashcard(
    record: ConjugationRecord,
    verb: str,
    phrases: Mapping[str, str] = DEFAULT_TENSE_PHRASES,
) -> FlashcardRecord:
    """Project a conjugation into a {value, definition} flashcard."""
    definition = DEFINITION_TEMPLATE.format(
        verb=verb,
        tense_phrase=tense_phrase(record.tense, phrases),
        pronoun=record.pronoun,
    )
    return FlashcardRecord(value=record.word, definition=definition)


def to_flashcards(
    records: Iterable[ConjugationRecord],
    verb: str,
    phrases: Mapping[str, str] = DEFAULT_TENSE_PHRASES,
) -> list[FlashcardRecord]:
    return [to_flashcard(record, verb, phrases) for record in records]


def to_csv(flashcards: Iterable[FlashcardRecord]) -> str:
    """Serialize flashcards with a `value,definition` header row."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(CSV_HEADER)
    for card in flashcards:
        writer.writerow((card.value, card.definition))
    return buf.getvalue()
