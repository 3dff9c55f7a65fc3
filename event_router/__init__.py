from event_router.context import (
    AnyContext,
    BaseContext,
    DynamoDBContext,
    DynamoDBData,
    ErrorContext,
    EventBridgeContext,
    EventBridgeData,
    NotFoundContext,
    SNSContext,
    SNSData,
    SQSContext,
    SQSData,
)
from event_router.core.config import RouterConfig
from event_router.core.constants import EventSource
from event_router.core.exceptions import (
    EventRouterError,
    ProtocolError,
    RegistrationError,
    UnknownEventTypeError,
)
from event_router.core.types import BatchItemFailure, BatchResponse
from event_router.core.utils.dynamodb import unmarshall
from event_router.router import EventDispatcher, EventRouter
from event_router.routing import Route, RouteOptions
from event_router.sources import (
    DynamoDBMatch,
    EventBridgeMatch,
    SNSMatch,
    SQSMatch,
)

__all__ = [
    "AnyContext",
    "BaseContext",
    "BatchItemFailure",
    "BatchResponse",
    "DynamoDBContext",
    "DynamoDBData",
    "DynamoDBMatch",
    "ErrorContext",
    "EventBridgeContext",
    "EventBridgeData",
    "EventBridgeMatch",
    "EventDispatcher",
    "EventRouter",
    "EventRouterError",
    "EventSource",
    "NotFoundContext",
    "ProtocolError",
    "RegistrationError",
    "Route",
    "RouteOptions",
    "RouterConfig",
    "SNSContext",
    "SNSData",
    "SNSMatch",
    "SQSContext",
    "SQSData",
    "SQSMatch",
    "UnknownEventTypeError",
    "unmarshall",
]
