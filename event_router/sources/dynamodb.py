from dataclasses import dataclass, replace

from aws_lambda_powertools.utilities.data_classes.dynamo_db_stream_event import (
    DynamoDBRecord,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from event_router.context import DynamoDBContext, DynamoDBData
from event_router.core import constants
from event_router.core.constants import EventSource
from event_router.core.types import Handler
from event_router.core.utils.arn import parse_table_name
from event_router.routing import Match, Route, RouteOptions, Router


@dataclass(frozen=True)
class DynamoDBMatch(Match):
    table_name: str | None = None
    event_name: str | None = None


class DynamoDBRouter(Router):
    source = EventSource.DYNAMODB
    match_class = DynamoDBMatch
    batchable = True

    def insert(
        self,
        handler: Handler,
        match: DynamoDBMatch | None = None,
        options: RouteOptions | None = None,
    ) -> Route:
        return self._add_for_event(constants.INSERT, handler, match, options)

    def modify(
        self,
        handler: Handler,
        match: DynamoDBMatch | None = None,
        options: RouteOptions | None = None,
    ) -> Route:
        return self._add_for_event(constants.MODIFY, handler, match, options)

    def remove(
        self,
        handler: Handler,
        match: DynamoDBMatch | None = None,
        options: RouteOptions | None = None,
    ) -> Route:
        return self._add_for_event(constants.REMOVE, handler, match, options)

    def _add_for_event(
        self,
        event_name: str,
        handler: Handler,
        match: DynamoDBMatch | None,
        options: RouteOptions | None,
    ) -> Route:
        match = replace(match or DynamoDBMatch(), event_name=event_name)
        return self.add(handler, match, options)

    def key(self, record: DynamoDBRecord) -> DynamoDBMatch:
        return DynamoDBMatch(
            table_name=parse_table_name(record.event_source_arn),
            event_name=record.raw_event.get("eventName"),
        )

    def record_id(self, record: DynamoDBRecord) -> str:
        return record.event_id

    def context(
        self, record: DynamoDBRecord, lambda_context: LambdaContext
    ) -> DynamoDBContext:
        return DynamoDBContext(
            lambda_context=lambda_context, dynamodb=DynamoDBData.from_record(record)
        )
