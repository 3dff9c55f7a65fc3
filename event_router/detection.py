from dataclasses import dataclass
from typing import Any

from aws_lambda_powertools.utilities.data_classes import (
    DynamoDBStreamEvent,
    EventBridgeEvent,
    SNSEvent,
    SQSEvent,
)

from event_router.core import constants
from event_router.core.constants import EventSource


@dataclass(frozen=True)
class DetectedEvent:
    """Shape of an incoming payload and its records, ``source`` is None when unrecognized."""

    source: EventSource | None
    records: tuple[Any, ...] = ()

    @property
    def recognized(self) -> bool:
        return self.source is not None


UNRECOGNIZED = DetectedEvent(source=None)


def _first_record(event: dict[str, Any]) -> dict[str, Any] | None:
    records = event.get("Records")
    if isinstance(records, list) and records and isinstance(records[0], dict):
        return records[0]
    return None


def detect_source(event: Any) -> EventSource | None:
    """Classify a payload by structure alone."""
    if not isinstance(event, dict):
        return None

    if (record := _first_record(event)) is not None:
        sns = record.get("Sns")
        match record.get("eventSource"):
            case constants.SQS_EVENT_SOURCE:
                return EventSource.SQS
            case _ if isinstance(sns, dict) and "TopicArn" in sns:
                return EventSource.SNS
            case constants.DYNAMODB_EVENT_SOURCE:
                return EventSource.DYNAMODB

    if all(field in event for field in constants.EVENTBRIDGE_FIELDS):
        return EventSource.EVENTBRIDGE

    return None


def detect_event(event: Any) -> DetectedEvent:
    """Classify a payload and wrap its records in powertools data classes."""
    match detect_source(event):
        case EventSource.SQS:
            return DetectedEvent(EventSource.SQS, tuple(SQSEvent(event).records))
        case EventSource.SNS:
            return DetectedEvent(EventSource.SNS, tuple(SNSEvent(event).records))
        case EventSource.DYNAMODB:
            return DetectedEvent(
                EventSource.DYNAMODB, tuple(DynamoDBStreamEvent(event).records)
            )
        case EventSource.EVENTBRIDGE:
            return DetectedEvent(EventSource.EVENTBRIDGE, (EventBridgeEvent(event),))
        case _:
            return UNRECOGNIZED
