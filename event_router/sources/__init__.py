from event_router.sources.dynamodb import DynamoDBMatch, DynamoDBRouter
from event_router.sources.eventbridge import EventBridgeMatch, EventBridgeRouter
from event_router.sources.sns import SNSMatch, SNSRouter
from event_router.sources.sqs import SQSMatch, SQSRouter

__all__ = [
    "DynamoDBMatch",
    "DynamoDBRouter",
    "EventBridgeMatch",
    "EventBridgeRouter",
    "SNSMatch",
    "SNSRouter",
    "SQSMatch",
    "SQSRouter",
]
