from dataclasses import dataclass
from os import getenv
from typing import Literal

from event_router.core import constants


@dataclass(frozen=True)
class RouterConfig:
    unknown_event: Literal["raise", "not_found"] = constants.RAISE
    log_event: bool = False

    def __post_init__(self) -> None:
        if self.unknown_event not in (constants.RAISE, constants.NOT_FOUND):
            raise ValueError(
                f"Unsupported unknown event policy '{self.unknown_event}', "
                f"expected '{constants.RAISE}' or '{constants.NOT_FOUND}'"
            )

    @classmethod
    def from_env(cls, **kwargs) -> "RouterConfig":
        """Build a config from environment variables, letting kwargs take precedence."""
        config = {}
        if unknown_event := getenv(constants.UNKNOWN_EVENT_ENV):
            config["unknown_event"] = unknown_event.strip().lower()
        if log_event := getenv(constants.LOG_EVENT_ENV):
            config["log_event"] = log_event.strip().lower() in constants.TRUTHY
        return cls(**(config | kwargs))
