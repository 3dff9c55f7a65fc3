from typing import Any, Awaitable, Callable, TypedDict


class BatchItemFailure(TypedDict):
    itemIdentifier: str


class BatchResponse(TypedDict):
    batchItemFailures: list[BatchItemFailure]


Next = Callable[[], Awaitable[None]]
Handler = Callable[[Any], Awaitable[None] | None]
Middleware = Callable[[Any, Next], Awaitable[None] | None]
ErrorHandler = Callable[[Exception, Any], Awaitable[None] | None]
