from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar

from aws_lambda_powertools.utilities.data_classes import EventBridgeEvent
from aws_lambda_powertools.utilities.data_classes.dynamo_db_stream_event import (
    DynamoDBRecord,
)
from aws_lambda_powertools.utilities.data_classes.sns_event import SNSEventRecord
from aws_lambda_powertools.utilities.data_classes.sqs_event import SQSRecord
from aws_lambda_powertools.utilities.typing import LambdaContext

from event_router.core.constants import EventSource
from event_router.core.utils.arn import (
    parse_queue_name,
    parse_table_name,
    parse_topic_name,
)
from event_router.core.utils.datetime import from_epoch, parse_timestamp
from event_router.core.utils.dynamodb import unmarshall
from event_router.core.utils.io import safe_json_parse


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class SQSData:
    queue: str
    body: Any
    message_id: str
    receipt_handle: str
    sent_timestamp: datetime | None
    approximate_receive_count: int
    approximate_first_receive_timestamp: datetime | None
    message_group_id: str | None
    message_deduplication_id: str | None
    attributes: dict[str, str]
    raw: SQSRecord = field(repr=False, compare=False)

    @classmethod
    def from_record(cls, record: SQSRecord) -> "SQSData":
        event = record.raw_event
        attributes = event.get("attributes") or {}
        message_attributes = event.get("messageAttributes") or {}

        return cls(
            queue=parse_queue_name(event["eventSourceARN"]),
            body=safe_json_parse(event.get("body")),
            message_id=event["messageId"],
            receipt_handle=event.get("receiptHandle", ""),
            sent_timestamp=from_epoch(attributes.get("SentTimestamp")),
            approximate_receive_count=_to_int(
                attributes.get("ApproximateReceiveCount")
            ),
            approximate_first_receive_timestamp=from_epoch(
                attributes.get("ApproximateFirstReceiveTimestamp")
            ),
            message_group_id=attributes.get("MessageGroupId"),
            message_deduplication_id=attributes.get("MessageDeduplicationId"),
            # Only string-valued attributes, binary ones stay on the raw record
            attributes={
                name: attribute["stringValue"]
                for name, attribute in message_attributes.items()
                if attribute.get("stringValue") is not None
            },
            raw=record,
        )

    def attribute(self, name: str) -> str | None:
        return self.attributes.get(name)


@dataclass(frozen=True)
class SNSData:
    topic: str
    topic_arn: str
    body: Any
    message_id: str
    subject: str | None
    timestamp: datetime | None
    attributes: dict[str, str]
    raw: SNSEventRecord = field(repr=False, compare=False)

    @classmethod
    def from_record(cls, record: SNSEventRecord) -> "SNSData":
        sns = record.raw_event["Sns"]
        topic_arn = sns["TopicArn"]

        return cls(
            topic=parse_topic_name(topic_arn),
            topic_arn=topic_arn,
            body=safe_json_parse(sns.get("Message")),
            message_id=sns["MessageId"],
            subject=sns.get("Subject"),
            timestamp=parse_timestamp(sns.get("Timestamp")),
            attributes={
                name: attribute.get("Value")
                for name, attribute in (sns.get("MessageAttributes") or {}).items()
            },
            raw=record,
        )

    def attribute(self, name: str) -> str | None:
        return self.attributes.get(name)


@dataclass(frozen=True)
class EventBridgeData:
    source: str
    detail_type: str
    detail: Any
    id: str
    account: str
    region: str
    time: datetime | None
    resources: list[str]
    raw: EventBridgeEvent = field(repr=False, compare=False)

    @classmethod
    def from_event(cls, event: EventBridgeEvent) -> "EventBridgeData":
        data = event.raw_event

        return cls(
            source=data["source"],
            detail_type=data["detail-type"],
            detail=data["detail"],
            id=data.get("id", ""),
            account=data.get("account", ""),
            region=data.get("region", ""),
            time=parse_timestamp(data.get("time")),
            resources=list(data.get("resources") or []),
            raw=event,
        )


@dataclass(frozen=True)
class DynamoDBData:
    table: str
    event_name: str
    keys: dict[str, Any]
    new_image: dict[str, Any] | None
    old_image: dict[str, Any] | None
    event_id: str
    sequence_number: str
    stream_arn: str
    stream_view_type: str | None
    approximate_creation_time: datetime | None
    raw: DynamoDBRecord = field(repr=False, compare=False)

    @classmethod
    def from_record(cls, record: DynamoDBRecord) -> "DynamoDBData":
        event = record.raw_event
        stream_record = event.get("dynamodb") or {}
        new_image = stream_record.get("NewImage")
        old_image = stream_record.get("OldImage")

        return cls(
            table=parse_table_name(event["eventSourceARN"]),
            event_name=event["eventName"],
            keys=unmarshall(stream_record.get("Keys") or {}),
            new_image=unmarshall(new_image) if new_image is not None else None,
            old_image=unmarshall(old_image) if old_image is not None else None,
            event_id=event["eventID"],
            sequence_number=stream_record.get("SequenceNumber", ""),
            stream_arn=event["eventSourceARN"],
            stream_view_type=stream_record.get("StreamViewType"),
            approximate_creation_time=from_epoch(
                stream_record.get("ApproximateCreationDateTime"), unit="s"
            ),
            raw=record,
        )


@dataclass(frozen=True, kw_only=True, eq=False)
class BaseContext:
    """Per-record context shared by middleware and the handler.

    The key/value store lives and dies with one record, use it to hand values
    from middleware to the handler or between middleware phases.
    """

    lambda_context: LambdaContext
    _store: dict[str, Any] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def get(self, key: str, default: Any = None) -> Any:
        return self._store.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._store[key] = value


@dataclass(frozen=True, kw_only=True, eq=False)
class SQSContext(BaseContext):
    source: ClassVar[EventSource] = EventSource.SQS
    sqs: SQSData


@dataclass(frozen=True, kw_only=True, eq=False)
class SNSContext(BaseContext):
    source: ClassVar[EventSource] = EventSource.SNS
    sns: SNSData


@dataclass(frozen=True, kw_only=True, eq=False)
class EventBridgeContext(BaseContext):
    source: ClassVar[EventSource] = EventSource.EVENTBRIDGE
    event: EventBridgeData


@dataclass(frozen=True, kw_only=True, eq=False)
class DynamoDBContext(BaseContext):
    source: ClassVar[EventSource] = EventSource.DYNAMODB
    dynamodb: DynamoDBData


@dataclass(frozen=True, kw_only=True, eq=False)
class NotFoundContext(BaseContext):
    source: EventSource | None
    raw: Any = field(repr=False)


@dataclass(frozen=True, kw_only=True, eq=False)
class ErrorContext(BaseContext):
    source: EventSource | None
    raw: Any = field(repr=False)


AnyContext = SQSContext | SNSContext | EventBridgeContext | DynamoDBContext
