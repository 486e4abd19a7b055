import logging
from collections.abc import Mapping

from conjuga.config import DEFAULT_TENSE_PHRASES
from conjuga.models import ConjugationRecord, FlashcardRecord
from conjuga.services.fetcher import fetch_verb_pages
from conjuga.services.formatter import to_flashcards
from conjuga.services.table_extractor import TableLocator, extract_from_html

logger = logging.getLogger(__name__)

VerbConjugations = tuple[str, list[ConjugationRecord]]


async def conjugate_verbs(
    verbs: list[str],
    mood: str,
    include_vosotros: bool = True,
    locator: TableLocator | None = None,
) -> list[VerbConjugations]:
    """Fetch and extract every verb; results keep the order of `verbs`."""
    pages = await fetch_verb_pages(verbs)

    results: list[VerbConjugations] = []
    for verb, html in zip(verbs, pages):
        records = extract_from_html(html, mood, include_vosotros, locator)
        logger.info("Extracted %d %s conjugations for %s", len(records), mood, verb)
        results.append((verb, records))
    return results


def build_flashcards(
    results: list[VerbConjugations],
    phrases: Mapping[str, str] = DEFAULT_TENSE_PHRASES,
) -> list[FlashcardRecord]:
    cards: list[FlashcardRecord] = []
    for verb, records in results:
        cards.extend(to_flashcards(records, verb, phrases))
    return cards
