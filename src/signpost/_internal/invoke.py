"""Invoke helpers — call sync or async handlers uniformly.

Handlers can be ``def`` or ``async def``. ``Router.dispatch_async`` must
handle both cases, so the sync/async check lives in exactly one place.

Usage::

    from signpost._internal.invoke import invoke

    result = await invoke(handler, request, response)
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(handler: Any, *args: Any, offload: bool = False, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        def health(request, response):
            return response.with_body("ok")

        async def user(request, response):
            record = await load_user(request.param("id"))
            return response.with_body(record.name)

    With ``offload=True`` a plain ``def`` handler runs in an anyio worker
    thread so a blocking handler does not stall the event loop.
    """
    if offload and not inspect.iscoroutinefunction(handler):
        call = functools.partial(handler, *args, **kwargs)
        result = await anyio.to_thread.run_sync(call)
    else:
        result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
