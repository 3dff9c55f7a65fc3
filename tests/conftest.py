from unittest.mock import MagicMock

from pytest import fixture

from event_router.core import constants


@fixture(autouse=True)
def router_environment_variables(monkeypatch):
    monkeypatch.delenv(constants.UNKNOWN_EVENT_ENV, raising=False)
    monkeypatch.delenv(constants.LOG_EVENT_ENV, raising=False)
    monkeypatch.setenv("POWERTOOLS_DEV", "true")  # Pretty print logs


@fixture
def lambda_context():
    context = MagicMock()
    context.aws_request_id = "mockID"
    context.function_name = "test"
    context.memory_limit_in_mb = "128"
    return context
