from json import dumps

ACCOUNT = "123456789012"
REGION = "ca-central-1"


def queue_arn(queue_name):
    return f"arn:aws:sqs:{REGION}:{ACCOUNT}:{queue_name}"


def topic_arn(topic_name):
    return f"arn:aws:sns:{REGION}:{ACCOUNT}:{topic_name}"


def stream_arn(table_name):
    return f"arn:aws:dynamodb:{REGION}:{ACCOUNT}:table/{table_name}/stream/2024-05-01T00:00:00.000"


def make_sqs_record(
    message_id="message-1",
    queue_name="orders",
    body=None,
    attributes=None,
    message_attributes=None,
):
    if body is None:
        body = {"id": message_id}
    return {
        "messageId": message_id,
        "receiptHandle": f"receipt-{message_id}",
        "body": body if isinstance(body, str) else dumps(body),
        "attributes": {
            "ApproximateReceiveCount": "1",
            "SentTimestamp": "1714521600000",
            "SenderId": "AROATEST",
            "ApproximateFirstReceiveTimestamp": "1714521600001",
            **(attributes or {}),
        },
        "messageAttributes": message_attributes or {},
        "md5OfBody": "098f6bcd4621d373cade4e832627b4f6",
        "eventSource": "aws:sqs",
        "eventSourceARN": queue_arn(queue_name),
        "awsRegion": REGION,
    }


def make_sqs_event(*records):
    return {"Records": list(records)}


def make_sns_record(
    message_id="sns-1",
    topic_name="alerts",
    message=None,
    subject=None,
    message_attributes=None,
):
    if message is None:
        message = {"id": message_id}
    return {
        "EventVersion": "1.0",
        "EventSubscriptionArn": f"{topic_arn(topic_name)}:subscription",
        "EventSource": "aws:sns",
        "Sns": {
            "SignatureVersion": "1",
            "Timestamp": "2024-05-01T00:00:00.000Z",
            "Signature": "EXAMPLE",
            "SigningCertUrl": "EXAMPLE",
            "MessageId": message_id,
            "Message": message if isinstance(message, str) else dumps(message),
            "MessageAttributes": message_attributes or {},
            "Type": "Notification",
            "UnsubscribeUrl": "EXAMPLE",
            "TopicArn": topic_arn(topic_name),
            "Subject": subject,
        },
    }


def make_sns_event(*records):
    return {"Records": list(records or [make_sns_record()])}


def make_eventbridge_event(
    source="orders.service", detail_type="OrderPlaced", detail=None, event_id="event-1"
):
    return {
        "version": "0",
        "id": event_id,
        "detail-type": detail_type,
        "source": source,
        "account": ACCOUNT,
        "time": "2024-05-01T00:00:00Z",
        "region": REGION,
        "resources": [f"arn:aws:events:{REGION}:{ACCOUNT}:rule/test"],
        "detail": {"orderId": "1234"} if detail is None else detail,
    }


def make_dynamodb_record(
    event_id="1",
    table_name="users",
    event_name="INSERT",
    keys=None,
    new_image=None,
    old_image=None,
):
    stream_record = {
        "ApproximateCreationDateTime": 1714521600,
        "Keys": keys or {"pk": {"S": "user#1"}},
        "SequenceNumber": f"11100000000000000000000{event_id}",
        "SizeBytes": 26,
        "StreamViewType": "NEW_AND_OLD_IMAGES",
    }
    if new_image is not None:
        stream_record["NewImage"] = new_image
    if old_image is not None:
        stream_record["OldImage"] = old_image

    return {
        "eventID": event_id,
        "eventName": event_name,
        "eventVersion": "1.1",
        "eventSource": "aws:dynamodb",
        "awsRegion": REGION,
        "dynamodb": stream_record,
        "eventSourceARN": stream_arn(table_name),
    }


def make_dynamodb_event(*records):
    return {"Records": list(records)}
