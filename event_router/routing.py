from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any, Callable, ClassVar

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from event_router.context import BaseContext
from event_router.core.constants import EventSource
from event_router.core.exceptions import RegistrationError
from event_router.core.types import Handler

logger = Logger(service=__name__)


@dataclass(frozen=True)
class Match:
    """Base for route matchers and the keys extracted from records.

    A matcher accepts a key when every field it sets equals the key's field,
    fields left as ``None`` are wildcards.
    """

    def matches(self, key: "Match") -> bool:
        return all(
            getattr(self, f.name) is None
            or getattr(self, f.name) == getattr(key, f.name, None)
            for f in fields(self)
        )


@dataclass(frozen=True)
class RouteOptions:
    sequential: bool = False


@dataclass(frozen=True)
class Route:
    handler: Handler
    match: Match | None = None
    options: RouteOptions = RouteOptions()

    def matches(self, key: Match) -> bool:
        return self.match is None or self.match.matches(key)


class Router(ABC):
    """Ordered routes for one event source, first match wins."""

    source: ClassVar[EventSource]
    match_class: ClassVar[type[Match]]
    batchable: ClassVar[bool] = False

    def __init__(self) -> None:
        self._routes: list[Route] | tuple[Route, ...] = []

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes)

    @property
    def frozen(self) -> bool:
        return isinstance(self._routes, tuple)

    def add(
        self,
        handler: Handler,
        match: Match | None = None,
        options: RouteOptions | None = None,
    ) -> Route:
        """Append a route, more specific routes must be added before catch-alls."""
        if self.frozen:
            raise RegistrationError(
                f"Cannot add a '{self.source.value}' route after the router was built"
            )
        if match is not None and not isinstance(match, self.match_class):
            raise RegistrationError(
                f"'{self.source.value}' routes expect a {self.match_class.__name__}, "
                f"got {type(match).__name__}"
            )

        route = Route(handler=handler, match=match, options=options or RouteOptions())
        self._routes.append(route)
        return route

    def route(
        self, match: Match | None = None, options: RouteOptions | None = None
    ) -> Callable[[Handler], Handler]:
        """Decorator form of add()."""

        def decorator(handler: Handler) -> Handler:
            self.add(handler, match, options)
            return handler

        return decorator

    def match_first(self, key: Match) -> Route | None:
        for route in self._routes:
            if route.matches(key):
                return route

        logger.debug("No '%s' route matches %s", self.source.value, key)
        return None

    def freeze(self) -> "Router":
        """Return a copy of this router whose route list can no longer change."""
        frozen = type(self)()
        frozen._routes = tuple(self._routes)
        return frozen

    @abstractmethod
    def key(self, record: Any) -> Match:
        """Extract the matchable fields of a record."""

    @abstractmethod
    def record_id(self, record: Any) -> str:
        """Identifier reported back to the platform when the record fails."""

    @abstractmethod
    def context(self, record: Any, lambda_context: LambdaContext) -> BaseContext:
        """Build the handler context for a record."""

    def raw(self, record: Any) -> Any:
        return record.raw_event
