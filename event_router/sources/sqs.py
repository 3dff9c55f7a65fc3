from dataclasses import dataclass

from aws_lambda_powertools.utilities.data_classes.sqs_event import SQSRecord
from aws_lambda_powertools.utilities.typing import LambdaContext

from event_router.context import SQSContext, SQSData
from event_router.core.constants import EventSource
from event_router.core.utils.arn import parse_queue_name
from event_router.routing import Match, Router


@dataclass(frozen=True)
class SQSMatch(Match):
    queue_name: str | None = None


class SQSRouter(Router):
    source = EventSource.SQS
    match_class = SQSMatch
    batchable = True

    def key(self, record: SQSRecord) -> SQSMatch:
        return SQSMatch(queue_name=parse_queue_name(record.event_source_arn))

    def record_id(self, record: SQSRecord) -> str:
        return record.message_id

    def context(self, record: SQSRecord, lambda_context: LambdaContext) -> SQSContext:
        return SQSContext(
            lambda_context=lambda_context, sqs=SQSData.from_record(record)
        )
