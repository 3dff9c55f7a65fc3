from dataclasses import dataclass

from aws_lambda_powertools.utilities.data_classes.sns_event import SNSEventRecord
from aws_lambda_powertools.utilities.typing import LambdaContext

from event_router.context import SNSContext, SNSData
from event_router.core.constants import EventSource
from event_router.core.utils.arn import parse_topic_name
from event_router.routing import Match, Router


@dataclass(frozen=True)
class SNSMatch(Match):
    topic_name: str | None = None


class SNSRouter(Router):
    source = EventSource.SNS
    match_class = SNSMatch

    def key(self, record: SNSEventRecord) -> SNSMatch:
        return SNSMatch(topic_name=parse_topic_name(record.sns.topic_arn))

    def record_id(self, record: SNSEventRecord) -> str:
        return record.sns.message_id

    def context(
        self, record: SNSEventRecord, lambda_context: LambdaContext
    ) -> SNSContext:
        return SNSContext(
            lambda_context=lambda_context, sns=SNSData.from_record(record)
        )
