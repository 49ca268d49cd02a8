"""
Fan-out/join — run independent awaitables concurrently and wait for all of
them, propagating the first failure.
"""

import asyncio
from collections.abc import Awaitable
from typing import Any


async def try_join(*aws: Awaitable[Any]) -> list[Any]:
    """Await every awaitable concurrently and return their results in order.

    As soon as one fails the others are cancelled and that failure is
    re-raised. If several fail together any one of them may surface.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        raise

    failed = [task for task in tasks if task in done and not task.cancelled() and task.exception() is not None]
    if failed:
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        raise failed[0].exception()  # type: ignore[misc]

    return [task.result() for task in tasks]
