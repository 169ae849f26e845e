"""Testes para app.observability.correlation."""

from __future__ import annotations

import asyncio

import pytest

from app.observability import (
    correlation_scope,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset() -> None:
    token = set_correlation_id("req-1")
    assert get_correlation_id() == "req-1"
    reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_scope_generates_and_restores() -> None:
    with correlation_scope() as correlation_id:
        assert correlation_id
        assert get_correlation_id() == correlation_id
    assert get_correlation_id() == ""


def test_scope_reuses_current_id() -> None:
    token = set_correlation_id("outer")
    try:
        with correlation_scope() as correlation_id:
            assert correlation_id == "outer"
    finally:
        reset_correlation_id(token)


@pytest.mark.asyncio
async def test_concurrent_tasks_keep_their_own_id() -> None:
    async def _worker(value: str) -> str:
        with correlation_scope(value):
            await asyncio.sleep(0)
            return get_correlation_id()

    assert await asyncio.gather(_worker("a"), _worker("b")) == ["a", "b"]
