"""Invoke helpers: call sync or async collaborators uniformly.

Host callbacks such as ``complete_onboarding`` may be ``def`` or
``async def``. Any code that calls one must handle both cases. This
module keeps the sync/async check in exactly one place.

Usage::

    from visanav._internal.invoke import invoke

    result = await invoke(complete_onboarding, data)
"""

import inspect
from typing import Any


async def invoke(callback: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *callback* and await the result if it's awaitable.

    Works with both sync and async callables::

        def complete_onboarding(data):
            return {"success": True}

        async def complete_onboarding(data):
            return await api.post("/onboarding", json=data)
    """
    result = callback(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
