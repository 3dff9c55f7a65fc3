from asyncio import run
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from event_router.batch import BatchProcessor
from event_router.context import ErrorContext, NotFoundContext
from event_router.core import constants
from event_router.core.config import RouterConfig
from event_router.core.constants import EventSource
from event_router.core.exceptions import ProtocolError, UnknownEventTypeError
from event_router.core.types import BatchResponse, ErrorHandler, Handler, Middleware
from event_router.core.utils.invoke import invoke
from event_router.detection import detect_event
from event_router.middleware import MiddlewareEntry, compose, middleware_for
from event_router.routing import Router
from event_router.sources import (
    DynamoDBRouter,
    EventBridgeRouter,
    SNSRouter,
    SQSRouter,
)

logger = Logger(service=__name__)


@dataclass(frozen=True)
class EventDispatcher:
    """Immutable routing tables plus the Lambda entry point.

    Call it like a Lambda handler, ``dispatcher(event, context)``, or await
    ``dispatch()`` when already running inside an event loop.
    """

    routers: Mapping[EventSource, Router]
    middleware: Mapping[EventSource, tuple[Middleware, ...]]
    not_found_handler: Handler | None = None
    error_handler: ErrorHandler | None = None
    config: RouterConfig = field(default_factory=RouterConfig)

    def __call__(
        self, event: Any, lambda_context: LambdaContext
    ) -> BatchResponse | None:
        return run(self.dispatch(event, lambda_context))

    async def dispatch(
        self, event: Any, lambda_context: LambdaContext
    ) -> BatchResponse | None:
        """Route one invocation, returning a partial batch response for SQS and DynamoDB."""
        if self.config.log_event:
            logger.info("Received event", extra={"event": event})

        detected = detect_event(event)
        if not detected.recognized:
            return await self._handle_unknown_event(event, lambda_context)

        logger.debug(
            "Detected '%s' event with %d record(s)",
            detected.source.value,
            len(detected.records),
        )
        router = self.routers[detected.source]

        if detected.source == EventSource.EVENTBRIDGE:
            (event_bridge_event,) = detected.records
            logger.debug(
                "Routing EventBridge event '%s'", router.record_id(event_bridge_event)
            )
            await self._process_record(router, event_bridge_event, lambda_context)
            return None

        async def process(record: Any) -> None:
            await self._process_record(router, record, lambda_context)

        outcome = await BatchProcessor(router, process).run(detected.records)

        if router.batchable:
            return outcome.response()
        # No partial failure protocol, fail the whole invocation
        if outcome.first_error is not None:
            raise outcome.first_error
        return None

    async def _process_record(
        self, router: Router, record: Any, lambda_context: LambdaContext
    ) -> None:
        try:
            route = router.match_first(router.key(record))
        except Exception as e:
            await self._handle_error(e, None, router, record, lambda_context)
            return

        if route is None:
            await self._handle_not_found(
                router.source, router.raw(record), lambda_context
            )
            return

        context = None
        try:
            context = router.context(record, lambda_context)
            chain = compose(self.middleware[router.source], route.handler)
            await chain(context)
        except Exception as e:
            await self._handle_error(e, context, router, record, lambda_context)

    async def _handle_error(
        self,
        error: Exception,
        context: Any,
        router: Router,
        record: Any,
        lambda_context: LambdaContext,
    ) -> None:
        if self.error_handler is None:
            raise error

        if context is None:
            context = ErrorContext(
                lambda_context=lambda_context,
                source=router.source,
                raw=router.raw(record),
            )
        logger.debug("Passing %s to the error handler", type(error).__name__)
        await invoke(self.error_handler, error, context)

        # Protocol violations always fail the record
        if isinstance(error, ProtocolError):
            raise error

    async def _handle_not_found(
        self, source: EventSource | None, raw: Any, lambda_context: LambdaContext
    ) -> None:
        if self.not_found_handler is None:
            logger.info(
                "No route matches '%s' payload and no not-found handler is registered",
                source.value if source else "unknown",
            )
            return

        context = NotFoundContext(lambda_context=lambda_context, source=source, raw=raw)
        await invoke(self.not_found_handler, context)

    async def _handle_unknown_event(
        self, event: Any, lambda_context: LambdaContext
    ) -> None:
        if self.config.unknown_event == constants.RAISE:
            raise UnknownEventTypeError(
                "Unknown event type. Ensure the function is triggered by a supported "
                "source (SQS, SNS, EventBridge, DynamoDB Streams).",
                event,
            )

        logger.warning("Unknown event type, handing it to the not-found handler")
        await self._handle_not_found(None, event, lambda_context)


class EventRouter:
    """Registration surface for handlers, middleware, not-found and error handlers.

    Register everything once at cold start, then call :meth:`build` and use the
    returned dispatcher as the Lambda handler::

        router = EventRouter()

        @router.sqs.route(SQSMatch(queue_name="orders"), RouteOptions(sequential=True))
        async def handle_order(c: SQSContext) -> None:
            ...

        lambda_handler = router.build()
    """

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config or RouterConfig.from_env()

        self.sqs = SQSRouter()
        self.sns = SNSRouter()
        self.eventbridge = EventBridgeRouter()
        self.dynamodb = DynamoDBRouter()

        self._middleware: list[MiddlewareEntry] = []
        self._not_found_handler: Handler | None = None
        self._error_handler: ErrorHandler | None = None

    @property
    def routers(self) -> tuple[Router, ...]:
        return self.sqs, self.sns, self.eventbridge, self.dynamodb

    def use(
        self, middleware: Middleware, source: EventSource | str | None = None
    ) -> Middleware:
        """Register middleware for every source, or only for given source."""
        if source is not None:
            source = EventSource(source)
        self._middleware.append(MiddlewareEntry(handler=middleware, source=source))
        return middleware

    def not_found(self, handler: Handler) -> Handler:
        self._not_found_handler = handler
        return handler

    def on_error(self, handler: ErrorHandler) -> ErrorHandler:
        """Register the error handler.

        Errors are swallowed once the error handler returns, raise from it to
        fail the record (or the invocation for SNS and EventBridge).
        """
        self._error_handler = handler
        return handler

    def build(self) -> EventDispatcher:
        return EventDispatcher(
            routers=MappingProxyType(
                {router.source: router.freeze() for router in self.routers}
            ),
            middleware=MappingProxyType(
                {
                    source: middleware_for(self._middleware, source)
                    for source in EventSource
                }
            ),
            not_found_handler=self._not_found_handler,
            error_handler=self._error_handler,
            config=self.config,
        )
