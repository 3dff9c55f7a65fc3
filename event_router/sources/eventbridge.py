from dataclasses import dataclass

from aws_lambda_powertools.utilities.data_classes import EventBridgeEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from event_router.context import EventBridgeContext, EventBridgeData
from event_router.core.constants import EventSource
from event_router.routing import Match, Router


@dataclass(frozen=True)
class EventBridgeMatch(Match):
    source: str | None = None
    detail_type: str | None = None


class EventBridgeRouter(Router):
    source = EventSource.EVENTBRIDGE
    match_class = EventBridgeMatch

    def key(self, event: EventBridgeEvent) -> EventBridgeMatch:
        return EventBridgeMatch(source=event.source, detail_type=event.detail_type)

    def record_id(self, event: EventBridgeEvent) -> str:
        return event.raw_event.get("id", "")

    def context(
        self, event: EventBridgeEvent, lambda_context: LambdaContext
    ) -> EventBridgeContext:
        return EventBridgeContext(
            lambda_context=lambda_context, event=EventBridgeData.from_event(event)
        )
