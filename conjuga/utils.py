FALSY_FLAGS = {"0", "false", "no", "off"}


def uppercase_first(text: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    The site's table headings read "Indicative", "Subjunctive", ... so a
    mood passed as "indicative" must match them.
    """
    return text[:1].upper() + text[1:]


def split_verbs(raw: str) -> list[str]:
    """Split a comma-separated verb list, dropping blanks and repeats."""
    verbs: dict[str, None] = {}
    for part in raw.split(","):
        verb = part.strip()
        if verb:
            verbs[verb] = None
    return list(verbs)


def parse_flag(value: str | None, default: bool = False) -> bool:
    """A flag that is present counts as true unless it is spelled falsy."""
    if value is None:
        return default
    return value.strip().lower() not in FALSY_FLAGS
