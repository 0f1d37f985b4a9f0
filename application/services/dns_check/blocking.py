from __future__ import annotations

import asyncio
import contextvars
import threading
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def _settle(future: asyncio.Future, result: Any, error: BaseException | None) -> None:
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(result)


async def run_blocking(fn: Callable[..., T], *args: Any) -> T:
    """Run a blocking call on a daemon thread and await its result.

    Unlike ``asyncio.to_thread`` the thread is not part of the loop's executor,
    so a lookup abandoned after a timeout neither delays ``asyncio.run`` nor
    keeps the interpreter alive at exit.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future = loop.create_future()
    ctx = contextvars.copy_context()

    def worker() -> None:
        result, error = None, None
        try:
            result = ctx.run(fn, *args)
        except BaseException as e:
            error = e
        try:
            loop.call_soon_threadsafe(_settle, future, result, error)
        except RuntimeError:
            # loop already closed; nobody is waiting for this result
            return

    threading.Thread(target=worker, name=f"dns-lookup:{getattr(fn, '__name__', 'call')}", daemon=True).start()
    return await future
