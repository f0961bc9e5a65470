"""Unified sync/async BinaryLane client.

Sync methods use plain names.
Async service groups use an `a` prefix.
"""

from __future__ import annotations

import asyncio
from typing import Any

from blcli.client.async_client import AsyncBinaryLaneClient

_SERVICE_GROUPS = (
    "account",
    "balance",
    "actions",
    "regions",
    "domains",
    "vpcs",
    "load_balancers",
    "firewalls",
    "floating_ips",
    "servers",
)


class _SyncRunner:
    """Persistent sync runner to keep all sync calls on a single event loop."""

    def __init__(self) -> None:
        self._runner = asyncio.Runner()
        self._closed = False

    def run(self, coro: Any) -> Any:
        if self._closed:
            raise RuntimeError("sync client is closed")

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return self._runner.run(coro)

        coro.close()
        raise RuntimeError("sync client methods cannot run inside an active event loop")

    def close(self) -> None:
        if self._closed:
            return

        self._runner.close()
        self._closed = True


class _SyncAPIProxy:
    def __init__(self, target: Any, run_sync: Any) -> None:
        self._target = target
        self._run_sync = run_sync

    def __getattr__(self, item: str) -> Any:
        attr = getattr(self._target, item)
        if not callable(attr):
            return attr

        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return self._run_sync(attr(*args, **kwargs))

        return wrapper


class BinaryLaneClient:
    """BinaryLane client exposing both sync and async service groups."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._sync_runner = _SyncRunner()
        self._closed = False
        self._async = AsyncBinaryLaneClient(*args, **kwargs)

        for name in _SERVICE_GROUPS:
            service = getattr(self._async, name)
            setattr(self, name, _SyncAPIProxy(service, self._sync_runner.run))
            setattr(self, f"a{name}", service)

    @property
    def profile_name(self) -> str:
        return self._async.profile_name

    @property
    def per_page(self) -> int:
        return self._async.per_page

    @property
    def max_pages(self) -> int:
        return self._async.max_pages

    # Lifecycle ----------------------------------------------------------------

    async def aclose(self) -> None:
        if self._closed:
            return

        await self._async.aclose()
        self._sync_runner.close()
        self._closed = True

    def close(self) -> None:
        if self._closed:
            return

        try:
            self._sync_runner.run(self._async.aclose())
        finally:
            self._sync_runner.close()
            self._closed = True

    async def __aenter__(self) -> BinaryLaneClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __enter__(self) -> BinaryLaneClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
