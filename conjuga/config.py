import json
import os
from types import MappingProxyType

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.json")

DEFAULTS = {
    "base_url": "https://www.spanishdict.com/conjugate/",
    "request_timeout": 30.0,
    "include_vosotros": False,
    "tense_phrases": {},
}

DEFAULT_TENSE_PHRASES = MappingProxyType(
    {
        "present": "tiempo presente",
        "preterite": "tiempo pretérito",
        "imperfect": "tiempo imperfecto",
        "conditional": "tiempo condicional",
        "future": "tiempo futuro",
    }
)


def _load() -> dict:
    if os.path.isfile(CONFIG_PATH):
        with open(CONFIG_PATH, encoding="utf-8") as f:
            return {**DEFAULTS, **json.load(f)}
    return {**DEFAULTS}


def get_base_url() -> str:
    """Return the conjugation page base URL (env var, then config file)."""
    url = os.environ.get("CONJUGA_BASE_URL", "") or _load()["base_url"]
    return url if url.endswith("/") else f"{url}/"


def get_request_timeout() -> float:
    """Return the upstream request timeout in seconds."""
    value = os.environ.get("CONJUGA_REQUEST_TIMEOUT", "")
    return float(value or _load()["request_timeout"])


def get_include_vosotros() -> bool:
    """Return whether the vosotros row is kept when a request does not say."""
    value = os.environ.get("CONJUGA_INCLUDE_VOSOTROS", "")
    if value:
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(_load()["include_vosotros"])


def get_tense_phrases() -> MappingProxyType:
    """Return the read-only tense -> phrase map, config entries over built-ins."""
    extra = _load().get("tense_phrases") or {}
    merged = {**DEFAULT_TENSE_PHRASES}
    merged.update({str(k).lower(): str(v) for k, v in extra.items()})
    return MappingProxyType(merged)
