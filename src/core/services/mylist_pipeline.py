"""Mylist pagination utilities.

The API caps a mylist page at 100 items, so reading a whole mylist means
walking pages until the server says there is nothing left. This module owns
that walk. It only depends on the `MylistSource` contract, which keeps it
reusable for any entry-point (CLI, batch jobs, tests) and keeps side-effects
(printing, progress bars) out of the core logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.domain.models import Item, MylistResponse, NicoResult, SessionCredential
from core.interfaces.mylist_source import MylistSource

logger = logging.getLogger(__name__)

MYLIST_ALL_PAGE_SIZE = 100


@dataclass
class PaginationHooks:
    """Optional callbacks for UI layers (progress)."""

    page_fetched: Callable[[int, int], None] | None = None


async def fetch_mylist_all(
    source: MylistSource,
    session: SessionCredential,
    mylist_id: int,
    *,
    hooks: PaginationHooks | None = None,
) -> NicoResult[MylistResponse]:
    """Fetch every page of a mylist and merge the items into page 1's envelope.

    Pages are requested strictly one after another (2, 3, 4, ...). The loop
    ends when a page reports `has_next=False` or arrives without payload.
    Any error raised by `source` aborts the whole walk; partial results are
    never returned.
    """

    hooks = hooks or PaginationHooks()

    first = await source.fetch_mylist_page(session, mylist_id, MYLIST_ALL_PAGE_SIZE, 1)
    if hooks.page_fetched:
        hooks.page_fetched(1, _item_count(first))
    if first.data is None or not first.data.mylist.has_next:
        return first

    extra_items: list[Item] = []
    page = 2
    while True:
        result = await source.fetch_mylist_page(session, mylist_id, MYLIST_ALL_PAGE_SIZE, page)
        if result.data is None:
            # End of data, not an error.
            logger.warning(
                "Mylist %s: page %s came back without data (status=%s); stopping pagination",
                mylist_id,
                page,
                result.meta.status,
            )
            break

        detail = result.data.mylist
        extra_items.extend(detail.items)
        if hooks.page_fetched:
            hooks.page_fetched(page, len(detail.items))
        if not detail.has_next:
            break
        page += 1

    logger.debug("Mylist %s: merged %s pages, %s extra items", mylist_id, page, len(extra_items))
    return _merge_items(first, extra_items)


def _item_count(result: NicoResult[MylistResponse]) -> int:
    if result.data is None:
        return 0
    return len(result.data.mylist.items)


def _merge_items(
    first: NicoResult[MylistResponse],
    extra_items: list[Item],
) -> NicoResult[MylistResponse]:
    assert first.data is not None
    detail = first.data.mylist
    merged = detail.model_copy(update={"items": [*detail.items, *extra_items]})
    data = first.data.model_copy(update={"mylist": merged})
    return first.model_copy(update={"data": data})
