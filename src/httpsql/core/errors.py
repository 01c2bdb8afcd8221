"""Exceptions raised along the query dispatch pipeline."""

from dataclasses import dataclass
from pathlib import Path


class HttpsqlError(Exception):
    """Base class for every error the dispatcher knows how to report."""


@dataclass
class UnsupportedProfileError(HttpsqlError):
    """A profile other than the supported ones was requested."""

    profile: str

    def __post_init__(self) -> None:
        # Required for Exception to work properly with dataclass
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"unsupported profile '{self.profile}', currently only 'local' is supported"


@dataclass
class FeatureNotImplementedError(HttpsqlError, NotImplementedError):
    """A recognized feature path that has not been built yet."""

    feature: str

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.feature} is not implemented yet"


@dataclass
class NoLocalConfigError(HttpsqlError):
    """No local query service configuration could be found."""

    config_dir: Path
    reason: str | None = None

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        message = f"cannot find local configs in {self.config_dir}"
        if self.reason:
            message += f" ({self.reason})"
        return (
            f"{message}, please add a local query service entry to the "
            "status record to create a new local cluster"
        )


@dataclass
class SourceUnavailableError(HttpsqlError):
    """The query source (file, url or stdin) could not be read."""

    source: str
    reason: str

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"cannot read query from {self.source}: {self.reason}"


@dataclass
class EndpointBuildError(HttpsqlError):
    """The query endpoint could not be derived from the local configuration."""

    reason: str

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"cannot parse query url: {self.reason}"


@dataclass
class StatementError(HttpsqlError):
    """Failure of a single statement. Never aborts the batch."""

    statement: str
    reason: str

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"query {self.statement} execution error: {self.reason}"


@dataclass
class QueryNetworkError(StatementError):
    """Transport level failure while submitting a statement."""


@dataclass
class ResponseDecodeError(StatementError):
    """The response body did not match the expected JSON contract."""

    status_code: int | None = None

    def __str__(self) -> str:
        status = f" (HTTP {self.status_code})" if self.status_code else ""
        return (
            f"query {self.statement} execution error: "
            f"cannot retrieve query result{status}: {self.reason}"
        )


@dataclass
class QueryServiceError(StatementError):
    """The query service accepted the statement but reported an error."""
