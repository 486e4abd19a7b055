import logging
from typing import Protocol

from bs4 import BeautifulSoup, Tag

from conjuga.models import ConjugationRecord

logger = logging.getLogger(__name__)

VOSOTROS = "vosotros"


class TableLocator(Protocol):
    """Finds the conjugation table for a mood, or None."""

    def locate(self, soup: BeautifulSoup, mood: str) -> Tag | None: ...


class SpanishDictTableLocator:
    """Locates tables by the site's `vtable-header` headings.

    The table sits inside the element that directly follows the heading.
    """

    header_class = "vtable-header"

    def locate(self, soup: BeautifulSoup, mood: str) -> Tag | None:
        heading = next(
            (h for h in soup.find_all(class_=self.header_class) if mood in h.get_text()),
            None,
        )
        if heading is None:
            return None

        wrapper = heading.find_next_sibling()
        if wrapper is None:
            return None
        return wrapper.find("table", recursive=False)


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def table_rows(table: Tag) -> list[Tag]:
    body = table.find("tbody", recursive=False)
    return (body or table).find_all("tr", recursive=False)


def _cells(row: Tag) -> list[Tag]:
    return row.find_all(["td", "th"], recursive=False)


def read_tenses(row: Tag) -> list[str]:
    """Read tense names from the header row, skipping the blank corner cell."""
    return [cell.get_text(strip=True).lower() for cell in _cells(row)[1:]]


def read_conjugations(
    row: Tag, tenses: list[str], include_vosotros: bool = True
) -> list[ConjugationRecord]:
    """Map one body row to records: cell 0 is the pronoun, the rest follow `tenses`."""
    cells = _cells(row)
    if not cells:
        return []

    pronoun = cells[0].get_text(strip=True)
    if not include_vosotros and pronoun.lower() == VOSOTROS:
        return []

    words = [cell.get_text(strip=True) for cell in cells[1:]]
    if len(words) != len(tenses):
        logger.warning(
            "Row %r has %d word cells for %d tenses", pronoun, len(words), len(tenses)
        )

    return [
        ConjugationRecord(word=word, pronoun=pronoun, tense=tense)
        for tense, word in zip(tenses, words)
    ]


def extract_conjugations(
    table: Tag | None, include_vosotros: bool = True
) -> list[ConjugationRecord]:
    """Walk a conjugation table into records, pronoun row by pronoun row."""
    if table is None:
        return []

    rows = table_rows(table)
    if not rows:
        return []

    tenses = read_tenses(rows[0])
    records: list[ConjugationRecord] = []
    for row in rows[1:]:
        records.extend(read_conjugations(row, tenses, include_vosotros))
    return records


def extract_from_html(
    html: str,
    mood: str,
    include_vosotros: bool = True,
    locator: TableLocator | None = None,
) -> list[ConjugationRecord]:
    locator = locator or SpanishDictTableLocator()
    table = locator.locate(parse_html(html), mood)
    if table is None:
        logger.warning("No conjugation table found for mood %r", mood)
        return []
    return extract_conjugations(table, include_vosotros)
