"""Core module for httpsql."""

from .config import Settings, Status
from .dispatcher import Dispatcher, DispatchReport
from .endpoint import Endpoint, build_query_endpoint, build_statement_url
from .executor import (
    ExecutorComponent,
    BaseExecutor,
    ExecutorDecorator,
    LoggingDecorator,
    ExecutorBuilder,
    ExecutionResult,
)
from .models import (
    Profile,
    QueryConfig,
    StatusRecord,
    ColumnField,
    ProgressStats,
    QueryResponse,
)
from .render import render_result
from .source import (
    SourceResolver,
    LiteralSource,
    FileSource,
    UrlSource,
    StdinSource,
    QuerySource,
    read_source,
)
from .splitter import split_statements
from .stats import Throughput, format_stats
from .writer import Writer
from .errors import (
    HttpsqlError,
    UnsupportedProfileError,
    FeatureNotImplementedError,
    NoLocalConfigError,
    SourceUnavailableError,
    EndpointBuildError,
    StatementError,
    QueryNetworkError,
    ResponseDecodeError,
    QueryServiceError,
)

__all__ = [
    # Config
    "Settings",
    "Status",
    # Dispatcher
    "Dispatcher",
    "DispatchReport",
    # Endpoint
    "Endpoint",
    "build_query_endpoint",
    "build_statement_url",
    # Executor
    "ExecutorComponent",
    "BaseExecutor",
    "ExecutorDecorator",
    "LoggingDecorator",
    "ExecutorBuilder",
    "ExecutionResult",
    # Models
    "Profile",
    "QueryConfig",
    "StatusRecord",
    "ColumnField",
    "ProgressStats",
    "QueryResponse",
    # Rendering
    "render_result",
    "Throughput",
    "format_stats",
    "Writer",
    # Sources
    "SourceResolver",
    "LiteralSource",
    "FileSource",
    "UrlSource",
    "StdinSource",
    "QuerySource",
    "read_source",
    "split_statements",
    # Errors
    "HttpsqlError",
    "UnsupportedProfileError",
    "FeatureNotImplementedError",
    "NoLocalConfigError",
    "SourceUnavailableError",
    "EndpointBuildError",
    "StatementError",
    "QueryNetworkError",
    "ResponseDecodeError",
    "QueryServiceError",
]
