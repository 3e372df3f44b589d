import asyncio
import logging
from typing import Sequence

from pokedex_browser.clients.pokeapi_client import CatalogClientError, PokeAPIClient
from pokedex_browser.models import DetailRecord, ListReference

logger = logging.getLogger(__name__)


class DetailAggregator:
    """Resolves the detail record of every reference in a list page.

    All fetches are issued at once and joined; an item whose fetch fails is
    dropped, the batch itself never fails. Output order is not guaranteed.
    """

    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def resolve(self, references: Sequence[ListReference]) -> list[DetailRecord]:
        if not references:
            return []

        tasks = [self._poke_client.fetch_detail(ref.url) for ref in references]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        records: list[DetailRecord] = []
        dropped = 0
        for ref, result in zip(references, results):
            if isinstance(result, CatalogClientError):
                logger.debug(f"Dropping '{ref.name}': {result.reason}")
                dropped += 1
            elif isinstance(result, BaseException):
                # Anything else is a bug, not a partial failure
                raise result
            else:
                records.append(result)

        if dropped:
            logger.warning(f"Detail batch partially failed: dropped {dropped} of {len(references)} items")
        logger.info(f"Resolved {len(records)} detail records")
        return records
