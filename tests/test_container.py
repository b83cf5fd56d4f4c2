"""Tests for container wiring."""

import asyncio

import pytest

from nutrition_resolver import containers
from nutrition_resolver.adapters.supabase_food_cache_repository import (
    SupabaseFoodCacheRepository,
)
from nutrition_resolver.config import Settings
from nutrition_resolver.containers import build_container
from nutrition_resolver.services.cache import InMemoryFoodCache


def test_build_container_uses_in_memory_cache_without_supabase(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.food_cache, InMemoryFoodCache)
    assert container.food_lookup_service.cache is container.food_cache
    assert container.nutrition_service.selector.lookup is container.food_lookup_service
    assert container.food_lookup_service.timeout_seconds == settings.fdc_timeout_seconds
    asyncio.run(container.close_resources())


def test_build_container_uses_supabase_when_configured(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    created: list[tuple[str, str]] = []

    def fake_create_client(url: str, key: str) -> object:
        created.append((url, key))
        return object()

    monkeypatch.setattr(containers, "create_client", fake_create_client)
    settings = Settings(
        fdc_api_key="fdc-key",
        supabase_url="https://project.supabase.test",
        supabase_service_key="service-key",
    )

    container = build_container(settings)

    assert created == [("https://project.supabase.test", "service-key")]
    assert isinstance(container.food_cache, SupabaseFoodCacheRepository)
    asyncio.run(container.close_resources())


def test_settings_detect_supabase_configuration() -> None:
    partial = Settings(supabase_url="https://x.test", supabase_service_key=None)
    complete = Settings(supabase_url="https://x.test", supabase_service_key="key")

    assert not partial.uses_supabase_cache
    assert complete.uses_supabase_cache
