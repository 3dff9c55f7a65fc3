"""Onion-ordered middleware composition.

For middleware ``[m0, m1]`` and handler ``h`` the call order is
``m0 before -> m1 before -> h -> m1 after -> m0 after``. Middleware that
returns without awaiting ``next()`` lets the rest of the chain run once it
is done, and awaiting ``next()`` twice in one middleware raises
:class:`ProtocolError`.
"""

from dataclasses import dataclass
from inspect import CORO_CREATED, getcoroutinestate
from typing import Any, Awaitable, Callable, Coroutine, Sequence

from event_router.core.constants import EventSource
from event_router.core.exceptions import ProtocolError
from event_router.core.types import Handler, Middleware
from event_router.core.utils.invoke import invoke


@dataclass(frozen=True)
class MiddlewareEntry:
    handler: Middleware
    source: EventSource | None = None

    def applies_to(self, source: EventSource) -> bool:
        return self.source is None or self.source == source


def middleware_for(
    entries: Sequence[MiddlewareEntry], source: EventSource
) -> tuple[Middleware, ...]:
    """Global middleware plus middleware filtered to given source, in registration order."""
    return tuple(entry.handler for entry in entries if entry.applies_to(source))


def compose(
    middleware: Sequence[Middleware], handler: Handler
) -> Callable[[Any], Awaitable[None]]:
    """Build one async callable running the middleware chain around handler."""

    async def chain(context: Any) -> None:
        reached = -1

        async def dispatch(position: int) -> None:
            nonlocal reached
            if position <= reached:
                raise ProtocolError("next() called multiple times")
            reached = position

            if position == len(middleware):
                await invoke(handler, context)
                return

            pending: list[Coroutine[Any, Any, None]] = []

            def call_next() -> Coroutine[Any, Any, None]:
                step = dispatch(position + 1)
                pending.append(step)
                return step

            try:
                await invoke(middleware[position], context, call_next)
            finally:
                for step in pending:
                    if getcoroutinestate(step) == CORO_CREATED:
                        step.close()

            # next() was never awaited
            if reached == position:
                await dispatch(position + 1)

        await dispatch(0)

    return chain
