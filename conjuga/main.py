import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from conjuga import config
from conjuga.models import ConjugateRequest, OutputFormat
from conjuga.services.formatter import to_csv
from conjuga.services.pipeline import build_flashcards, conjugate_verbs
from conjuga.utils import parse_flag, split_verbs, uppercase_first

load_dotenv()

logger = logging.getLogger(__name__)

MISSING_PARAMS_MESSAGE = "You must supply the 'verb' and the 'mood' parameters"

app = FastAPI()
app.state.tense_phrases = config.get_tense_phrases()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _build_request(
    verb: str | None,
    verbs: str | None,
    mood: str | None,
    include_vosotros: str | None,
    output: str | None,
) -> ConjugateRequest:
    """Validate query parameters. Raises ValueError with a user-facing message."""
    verb_list = split_verbs(verbs or "")
    if verb and verb.strip() and verb.strip() not in verb_list:
        verb_list.insert(0, verb.strip())
    mood = (mood or "").strip()
    if not verb_list or not mood:
        raise ValueError(MISSING_PARAMS_MESSAGE)

    if output:
        try:
            fmt = OutputFormat(output.strip().lower())
        except ValueError as err:
            choices = ", ".join(f.value for f in OutputFormat)
            raise ValueError(
                f"Unknown format {output!r}. Expected one of: {choices}"
            ) from err
    else:
        fmt = OutputFormat.CSV if verbs else OutputFormat.RECORDS

    return ConjugateRequest(
        verbs=verb_list,
        mood=uppercase_first(mood),
        include_vosotros=parse_flag(include_vosotros, config.get_include_vosotros()),
        output=fmt,
    )


@app.api_route("/api/conjugate", methods=["GET", "POST"])
async def api_conjugate(
    verb: str | None = None,
    verbs: str | None = None,
    mood: str | None = None,
    include_vosotros: str | None = Query(None, alias="includeVosotros"),
    output: str | None = Query(None, alias="format"),
):
    try:
        req = _build_request(verb, verbs, mood, include_vosotros, output)
    except ValueError as err:
        return PlainTextResponse(str(err), status_code=400)

    try:
        results = await conjugate_verbs(req.verbs, req.mood, req.include_vosotros)
    except RuntimeError as err:
        raise HTTPException(status_code=502, detail=str(err)) from err

    if req.output is OutputFormat.RECORDS:
        return [record for _, records in results for record in records]

    cards = build_flashcards(results, app.state.tense_phrases)
    if req.output is OutputFormat.FLASHCARDS:
        return cards

    logger.info("Serializing %d flashcards as CSV", len(cards))
    return Response(content=to_csv(cards), media_type="text/csv; charset=utf-8")


@app.get("/api/health")
async def api_health():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("conjuga.main:app", host="0.0.0.0", port=8000, reload=True)
