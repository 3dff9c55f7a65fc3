from inspect import isawaitable
from typing import Any, Callable


async def invoke(func: Callable[..., Any], *args: Any) -> Any:
    """Call a sync or async callable and await its result when needed."""
    result = func(*args)
    if isawaitable(result):
        result = await result
    return result
