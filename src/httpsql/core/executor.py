"""Decorator-based statement executor for httpsql."""

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable
import logging
import time

import requests
from pydantic import ValidationError

from .endpoint import Endpoint
from .errors import QueryNetworkError, QueryServiceError, ResponseDecodeError
from .models import QueryResponse


logger = logging.getLogger(__name__)

STATEMENT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True)
class ExecutionResult:
    """A decoded response and the wall clock duration of its round trip."""

    statement: str
    response: QueryResponse
    elapsed_ms: int


@runtime_checkable
class ExecutorComponent(Protocol):
    """Protocol for all executor components (base + decorators)."""

    @property
    def url(self) -> str:
        """Url statements are submitted to."""
        ...

    def execute(self, statement: str) -> ExecutionResult:
        """Submit one statement and wait for its decoded response."""
        ...

    def close(self) -> None:
        """Release the underlying HTTP session."""
        ...


class BaseExecutor:
    """
    Core executor that posts statements to the query endpoint.

    This is the innermost component in the decorator chain.
    """

    def __init__(self, endpoint: Endpoint):
        self._endpoint = endpoint

    @property
    def url(self) -> str:
        return self._endpoint.url

    def execute(self, statement: str) -> ExecutionResult:
        """
        Submit one statement.

        Raises:
            QueryNetworkError: If the request could not be completed.
            ResponseDecodeError: If the body is not a valid query result.
            QueryServiceError: If the service reported an error for the statement.
        """
        start = time.perf_counter()
        try:
            http_response = self._endpoint.session.post(
                self._endpoint.url,
                data=statement.encode("utf-8"),
                headers={"Content-Type": STATEMENT_CONTENT_TYPE},
                timeout=self._endpoint.timeout,
            )
        except requests.RequestException as e:
            raise QueryNetworkError(statement=statement, reason=str(e)) from e

        response = self._decode(statement, http_response)
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        if response.error is not None:
            raise QueryServiceError(statement=statement, reason=response.error_message)
        if not http_response.ok:
            raise ResponseDecodeError(
                statement=statement,
                reason="unexpected response status",
                status_code=http_response.status_code,
            )

        return ExecutionResult(
            statement=statement, response=response, elapsed_ms=elapsed_ms
        )

    def _decode(
        self, statement: str, http_response: requests.Response
    ) -> QueryResponse:
        try:
            payload = http_response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                statement=statement,
                reason=f"response is not valid JSON: {e}",
                status_code=http_response.status_code,
            ) from e

        try:
            return QueryResponse.model_validate(payload)
        except ValidationError as e:
            raise ResponseDecodeError(
                statement=statement,
                reason=str(e),
                status_code=http_response.status_code,
            ) from e

    def close(self) -> None:
        self._endpoint.close()


class ExecutorDecorator:
    """
    Base class for executor decorators (structural decorator pattern).

    Subclass this to add behavior before/after statement execution.
    """

    def __init__(self, wrapped: ExecutorComponent):
        self._wrapped = wrapped

    @property
    def url(self) -> str:
        return self._wrapped.url

    def execute(self, statement: str) -> ExecutionResult:
        """Default: delegate to wrapped component."""
        return self._wrapped.execute(statement)

    def close(self) -> None:
        """Close resources, delegating to wrapped component."""
        self._wrapped.close()


class LoggingDecorator(ExecutorDecorator):
    """Decorator that logs statement execution timing."""

    def __init__(
        self, wrapped: ExecutorComponent, log: logging.Logger | None = None
    ) -> None:
        super().__init__(wrapped)
        self._log = log or logger

    def execute(self, statement: str) -> ExecutionResult:
        self._log.info(f"Executing statement {statement!r} on {self.url}")
        start = time.perf_counter()
        try:
            result = self._wrapped.execute(statement)
            elapsed = time.perf_counter() - start
            self._log.info(f"Statement completed in {elapsed:.3f}s")
            return result
        except Exception as e:
            elapsed = time.perf_counter() - start
            self._log.error(f"Statement failed after {elapsed:.3f}s: {e}")
            raise


class ExecutorBuilder:
    """Fluent builder for constructing decorated executors."""

    def __init__(self, endpoint: Endpoint):
        self._endpoint = endpoint
        self._decorator_factories: list[
            Callable[[ExecutorComponent], ExecutorComponent]
        ] = []

    def with_logging(self, log: logging.Logger | None = None) -> "ExecutorBuilder":
        """Add logging decorator."""
        self._decorator_factories.append(lambda wrapped: LoggingDecorator(wrapped, log))
        return self

    def with_decorator(
        self, decorator_factory: Callable[[ExecutorComponent], ExecutorComponent]
    ) -> "ExecutorBuilder":
        """
        Add a custom decorator.

        Args:
            decorator_factory: Callable that takes wrapped ExecutorComponent
                              and returns a decorated ExecutorComponent.
        """
        self._decorator_factories.append(decorator_factory)
        return self

    def build(self) -> ExecutorComponent:
        """Build the executor chain, innermost to outermost."""
        executor: ExecutorComponent = BaseExecutor(self._endpoint)
        for factory in self._decorator_factories:
            executor = factory(executor)

        return executor
