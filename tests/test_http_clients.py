"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from nutrition_resolver.adapters.fdc_client import SEARCH_DATA_TYPES, HttpxFdcClient


def _client(handler) -> HttpxFdcClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    return HttpxFdcClient(
        api_key="key",
        base_url="https://api.test/fdc/v1",
        http_client=async_client,
        timeout_seconds=2.0,
    )


def test_fdc_client_search_posts_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"foods": [{"fdcId": 1}]})

    client = _client(handler)
    result = asyncio.run(client.search_foods("cheese pizza", page_size=3))

    assert result == {"foods": [{"fdcId": 1}]}
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/fdc/v1/foods/search"
    assert request.url.params["api_key"] == "key"
    payload = json.loads(request.content.decode())
    assert payload["query"] == "cheese pizza"
    assert payload["pageSize"] == 3
    assert payload["dataType"] == list(SEARCH_DATA_TYPES)
    assert "Branded" not in payload["dataType"]


def test_fdc_client_get_food() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/fdc/v1/food/171077"
        return httpx.Response(200, json={"fdcId": 171077, "foodNutrients": []})

    client = _client(handler)
    food = asyncio.run(client.get_food(171077))

    assert food["fdcId"] == 171077


def test_fdc_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "boom"})

    client = _client(handler)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.search_foods("rice"))


def test_fdc_client_close_closes_session() -> None:
    client = HttpxFdcClient.create(api_key="key", base_url="https://api.test")

    asyncio.run(client.close())

    assert client.http_client.is_closed
