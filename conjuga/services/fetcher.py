import asyncio
import logging
from urllib.parse import quote

import httpx

from conjuga import config

logger = logging.getLogger(__name__)


def verb_url(verb: str, base_url: str | None = None) -> str:
    """Build the conjugation page URL for a verb."""
    base = base_url or config.get_base_url()
    return f"{base}{quote(verb.strip(), safe='')}"


async def fetch_verb_page(client: httpx.AsyncClient, verb: str) -> str:
    """GET the conjugation page for one verb and return its HTML."""
    url = verb_url(verb)
    logger.info("Fetching %s", url)

    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as err:
        raise RuntimeError(
            f"Upstream error (status {err.response.status_code}) for verb {verb!r}: {err}"
        ) from err
    except httpx.RequestError as err:
        raise RuntimeError(
            f"Upstream request failed for verb {verb!r} at {url}. Error: {err}"
        ) from err

    return response.text


async def fetch_verb_pages(verbs: list[str]) -> list[str]:
    """Fetch every verb page concurrently; pages come back in input order.

    If one fetch fails the others are cancelled and awaited before the
    client closes.
    """
    timeout = config.get_request_timeout()
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        tasks = [asyncio.create_task(fetch_verb_page(client, verb)) for verb in verbs]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
