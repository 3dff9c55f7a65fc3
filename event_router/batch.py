from asyncio import gather
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Sequence

from aws_lambda_powertools import Logger

from event_router.core.types import BatchResponse
from event_router.routing import Router

logger = Logger(service=__name__)


@dataclass(frozen=True)
class BatchOutcome:
    failures: tuple[str, ...] = ()
    errors: tuple[Exception, ...] = ()

    @property
    def first_error(self) -> Exception | None:
        return self.errors[0] if self.errors else None

    def response(self) -> BatchResponse:
        """Partial batch failure response understood by Lambda event source mappings."""
        return {
            "batchItemFailures": [
                {"itemIdentifier": item_identifier} for item_identifier in self.failures
            ]
        }


class BatchProcessor:
    """Process the records of one batch sequentially or concurrently.

    The mode is fixed by the route matching the first record. Concurrent mode
    isolates failures per record. Sequential mode stops at the first failure
    and reports that record and every record after it, so ordered sources
    (e.g. FIFO queues) are redelivered in order.
    """

    def __init__(
        self, router: Router, process: Callable[[Any], Awaitable[None]]
    ) -> None:
        self.router = router
        self.process = process

    def is_sequential(self, record: Any) -> bool:
        try:
            route = self.router.match_first(self.router.key(record))
        except Exception:
            # A malformed first record goes through the error path once processed
            return False
        return route is not None and route.options.sequential

    async def run(self, records: Sequence[Any]) -> BatchOutcome:
        if not records:
            return BatchOutcome()

        if self.is_sequential(records[0]):
            return await self._run_sequentially(records)
        return await self._run_concurrently(records)

    async def _run_sequentially(self, records: Sequence[Any]) -> BatchOutcome:
        for position, record in enumerate(records):
            try:
                await self.process(record)
            except Exception as e:
                remaining = records[position:]
                logger.warning(
                    "'%s' record '%s' failed, marking it and %d remaining record(s) as failed",
                    self.router.source.value,
                    self._record_id(record),
                    len(remaining) - 1,
                    exc_info=e,
                )
                return BatchOutcome(failures=self._ids(remaining), errors=(e,))

        return BatchOutcome()

    async def _run_concurrently(self, records: Sequence[Any]) -> BatchOutcome:
        results = await gather(
            *(self.process(record) for record in records), return_exceptions=True
        )

        failed, errors = [], []
        for record, result in zip(records, results):
            if isinstance(result, Exception):
                logger.warning(
                    "'%s' record '%s' failed",
                    self.router.source.value,
                    self._record_id(record),
                    exc_info=result,
                )
                failed.append(record)
                errors.append(result)
            elif isinstance(result, BaseException):
                raise result

        return BatchOutcome(failures=self._ids(failed), errors=tuple(errors))

    def _record_id(self, record: Any) -> str:
        try:
            return self.router.record_id(record)
        except Exception:
            # An empty identifier makes Lambda retry the whole batch
            logger.error("'%s' record has no identifier", self.router.source.value)
            return ""

    def _ids(self, records: Sequence[Any]) -> tuple[str, ...]:
        # Ordered and without duplicates
        return tuple(dict.fromkeys(self._record_id(record) for record in records))
