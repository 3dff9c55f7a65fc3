from enum import Enum


class EventSource(str, Enum):
    SQS = "sqs"
    SNS = "sns"
    EVENTBRIDGE = "event"
    DYNAMODB = "dynamodb"


# Record-level source tags
SQS_EVENT_SOURCE = "aws:sqs"
DYNAMODB_EVENT_SOURCE = "aws:dynamodb"

# Top-level EventBridge fields
EVENTBRIDGE_FIELDS = ("source", "detail-type", "detail")

# DynamoDB stream event names
INSERT = "INSERT"
MODIFY = "MODIFY"
REMOVE = "REMOVE"

# Unknown payload policies
RAISE = "raise"
NOT_FOUND = "not_found"

# Environment variable names
UNKNOWN_EVENT_ENV = "EVENT_ROUTER_UNKNOWN_EVENT"
LOG_EVENT_ENV = "EVENT_ROUTER_LOG_EVENT"

TRUTHY = ("1", "true", "yes", "on")
