"""Orchestration for the concurrent feed fetches."""

from __future__ import annotations

import asyncio

from ghstatus.config.settings import Settings
from ghstatus.core.fetch import fetch_components
from ghstatus.core.fetch import fetch_incidents
from ghstatus.core.http import cleanup
from ghstatus.models import ComponentsResponse
from ghstatus.models import IncidentsResponse


async def fetch_summary(
    config: Settings | None = None,
) -> tuple[ComponentsResponse, IncidentsResponse]:
    """Fetch both feeds concurrently.

    Both requests start immediately. The first failure from either one ends
    the run: the other request is cancelled and the error propagates. When
    both succeed the results are read components first, then incidents.

    Args:
        config: Settings to use instead of the defaults

    Returns:
        Tuple of (components, incidents)
    """
    components_task = asyncio.create_task(fetch_components(config))
    incidents_task = asyncio.create_task(fetch_incidents(config))
    tasks = (components_task, incidents_task)

    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        for task in tasks:
            if task in done and task.exception() is not None:
                raise task.exception()

        return components_task.result(), incidents_task.result()
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        await cleanup()
