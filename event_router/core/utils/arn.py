from re import search


def parse_queue_name(event_source_arn: str) -> str:
    """Get the queue name from an SQS ARN (arn:aws:sqs:region:account:queue)."""
    return event_source_arn.rsplit(":", maxsplit=1)[-1]


def parse_topic_name(topic_arn: str) -> str:
    """Get the topic name from an SNS topic ARN (arn:aws:sns:region:account:topic)."""
    return topic_arn.rsplit(":", maxsplit=1)[-1]


def parse_table_name(stream_arn: str) -> str:
    """Get the table name from a DynamoDB stream ARN (...:table/<name>/stream/<label>)."""
    if match := search(r"table/([^/]+)", stream_arn):
        return match.group(1)
    return ""
