from __future__ import annotations

import logging

import httpx
import pytest

from adapters.nicovideo import NicoMylistClient
from core.domain.models import MylistResponse, MylistsResponse, NicoErrorEnvelope, NicoMeta, NicoResult
from core.errors import NicoStatusError
from core.services.mylist_pipeline import MYLIST_ALL_PAGE_SIZE, PaginationHooks, fetch_mylist_all
from tests.factories import envelope, item_payload, json_response, mylist_detail_payload, paged_mylist


class StubSource:
    """`MylistSource` en memoria: una respuesta (o excepción) por página."""

    def __init__(self, pages: list[dict | Exception]) -> None:
        self.pages = pages
        self.calls: list[tuple[int, int, int]] = []

    async def fetch_mylists(self, session, sample_item_count: int) -> NicoResult[MylistsResponse]:
        raise AssertionError("not used")

    async def fetch_mylist_page(self, session, mylist_id: int, page_size: int, page: int) -> NicoResult[MylistResponse]:
        self.calls.append((mylist_id, page_size, page))
        response = self.pages[page - 1]
        if isinstance(response, Exception):
            raise response
        return NicoResult[MylistResponse].model_validate(response)


def _watch_ids(result: NicoResult[MylistResponse]) -> list[str]:
    return [item.watch_id for item in result.require_data().mylist.items]


@pytest.mark.asyncio
async def test_single_page_is_returned_unchanged(session) -> None:
    pages = paged_mylist([[item_payload(1), item_payload(2), item_payload(3)]])
    source = StubSource(pages)

    result = await fetch_mylist_all(source, session, 71381719)

    assert source.calls == [(71381719, MYLIST_ALL_PAGE_SIZE, 1)]
    assert result == NicoResult[MylistResponse].model_validate(pages[0])


@pytest.mark.asyncio
async def test_pages_are_fetched_in_order_and_concatenated(session) -> None:
    pages = paged_mylist(
        [
            [item_payload(1), item_payload(2)],
            [item_payload(3)],
            [item_payload(4), item_payload(5)],
            [item_payload(6)],
        ]
    )
    source = StubSource(pages)

    result = await fetch_mylist_all(source, session, 71381719)

    assert [page for _, _, page in source.calls] == [1, 2, 3, 4]
    assert all(size == 100 for _, size, _ in source.calls)
    assert _watch_ids(result) == ["sm1", "sm2", "sm3", "sm4", "sm5", "sm6"]
    # El resto del envelope es el de la página 1.
    assert result.require_data().mylist.has_next is True
    assert result.require_data().mylist.total_item_count == 6


@pytest.mark.asyncio
async def test_missing_data_on_first_page_short_circuits(session) -> None:
    source = StubSource([{"meta": {"status": 200}, "data": None}, envelope({"mylist": mylist_detail_payload()})])

    result = await fetch_mylist_all(source, session, 71381719)

    assert result.data is None
    assert len(source.calls) == 1


@pytest.mark.asyncio
async def test_missing_data_mid_walk_ends_pagination(session, caplog) -> None:
    pages = paged_mylist([[item_payload(1)], [item_payload(2)], [item_payload(3)]])
    pages[2] = {"meta": {"status": 200}}
    source = StubSource(pages)

    with caplog.at_level(logging.WARNING, logger="core.services.mylist_pipeline"):
        result = await fetch_mylist_all(source, session, 71381719)

    assert [page for _, _, page in source.calls] == [1, 2, 3]
    assert _watch_ids(result) == ["sm1", "sm2"]
    assert "without data" in caplog.text


@pytest.mark.asyncio
async def test_error_on_later_page_discards_partial_results(session) -> None:
    error = NicoStatusError(NicoErrorEnvelope(meta=NicoMeta(status=500, error_code="INTERNAL_SERVER_ERROR")))
    pages: list[dict | Exception] = [*paged_mylist([[item_payload(1)], [item_payload(2)]])[:1], error]
    source = StubSource(pages)

    with pytest.raises(NicoStatusError) as excinfo:
        await fetch_mylist_all(source, session, 71381719)

    assert excinfo.value.error_code == "INTERNAL_SERVER_ERROR"
    assert len(source.calls) == 2


@pytest.mark.asyncio
async def test_hooks_report_each_page(session) -> None:
    source = StubSource(paged_mylist([[item_payload(1), item_payload(2)], [item_payload(3)]]))
    seen: list[tuple[int, int]] = []

    await fetch_mylist_all(source, session, 71381719, hooks=PaginationHooks(page_fetched=lambda p, n: seen.append((p, n))))

    assert seen == [(1, 2), (2, 1)]


@pytest.mark.asyncio
async def test_client_fetch_all_single_page_makes_one_request(settings, session, recording_transport) -> None:
    payload = envelope(
        {"mylist": mylist_detail_payload(71381719, items=[item_payload(1), item_payload(2), item_payload(3)])}
    )
    transport = recording_transport(lambda request: json_response(payload))
    client = NicoMylistClient(settings, transport=transport)

    result = await client.fetch_mylist_all(session, 71381719)

    assert len(result.require_data().mylist.items) == 3
    assert len(transport.requests) == 1
    assert transport.requests[0].url.params["pageSize"] == "100"


@pytest.mark.asyncio
async def test_client_fetch_all_walks_pages_over_http(settings, session, recording_transport) -> None:
    pages = paged_mylist([[item_payload(i) for i in range(1, 101)], [item_payload(101), item_payload(102)]])
    transport = recording_transport(
        lambda request: json_response(pages[int(request.url.params["page"]) - 1])
    )
    client = NicoMylistClient(settings, transport=transport)

    result = await client.fetch_mylist_all(session, 71381719)

    assert transport.pages == [1, 2]
    assert len(result.require_data().mylist.items) == 102
    assert _watch_ids(result)[-1] == "sm102"


@pytest.mark.asyncio
async def test_client_fetch_all_propagates_status_error(settings, session, recording_transport) -> None:
    first = paged_mylist([[item_payload(1)], [item_payload(2)]])[0]

    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.params["page"] == "1":
            return json_response(first)
        return httpx.Response(403, text='{"meta":{"status":403,"errorCode":"FORBIDDEN"}}')

    transport = recording_transport(_handler)
    client = NicoMylistClient(settings, transport=transport)

    with pytest.raises(NicoStatusError) as excinfo:
        await client.fetch_mylist_all(session, 71381719)

    assert excinfo.value.status == 403
    assert transport.pages == [1, 2]
