import logging
from typing import Iterable

from pokedex_browser.models import DetailRecord

logger = logging.getLogger(__name__)


class CollectionState:
    """Merged detail records of the last completed fetch cycle.

    The collection is only ever replaced wholesale. Records are unique by
    name and kept in id order, since the aggregator does not preserve input order.
    """

    def __init__(self):
        self._records: tuple[DetailRecord, ...] = ()

    def replace(self, records: Iterable[DetailRecord]) -> None:
        unique: dict[str, DetailRecord] = {}
        for record in records:
            if record.name in unique:
                logger.warning(f"Duplicate record '{record.name}' ignored")
                continue
            unique[record.name] = record
        self._records = tuple(sorted(unique.values(), key=lambda r: r.id))

    def get_all(self) -> tuple[DetailRecord, ...]:
        return self._records

    def find(self, url: str) -> DetailRecord | None:
        return next((r for r in self._records if r.url == url), None)

    def __len__(self) -> int:
        return len(self._records)
