"""Orchestration of a query invocation from source to rendered results."""

import logging
from dataclasses import dataclass, field
from typing import Callable

from .config import Settings, Status
from .endpoint import Endpoint, build_query_endpoint
from .errors import HttpsqlError, NoLocalConfigError, StatementError
from .executor import ExecutionResult, ExecutorBuilder, ExecutorComponent
from .models import Profile
from .render import render_result
from .source import SourceResolver, read_source
from .splitter import split_statements
from .stats import format_stats
from .writer import Writer


logger = logging.getLogger(__name__)


@dataclass
class DispatchReport:
    """Outcome of one invocation of the query command."""

    statements: int = 0
    succeeded: int = 0
    failed: int = 0
    error: HttpsqlError | None = None
    failures: list[StatementError] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        """True when the invocation stopped before any statement ran."""
        return self.error is not None

    @property
    def ok(self) -> bool:
        return not self.aborted and self.failed == 0


class Dispatcher:
    """
    Runs every statement of a query source against the local query service.

    Failures before the first statement abort the invocation with a single
    error line. Failures of a single statement are reported and the batch
    continues with the next one.
    """

    def __init__(
        self,
        settings: Settings,
        writer: Writer,
        executor_factory: Callable[[Endpoint], ExecutorComponent] | None = None,
    ) -> None:
        self._settings = settings
        self._writer = writer
        self._executor_factory = executor_factory or (
            lambda endpoint: ExecutorBuilder(endpoint).with_logging().build()
        )

    def run(self, query: str | None, profile: str = Profile.LOCAL.value) -> DispatchReport:
        """
        Execute the query source for the requested profile.

        Args:
            query: Literal statements, a file path or an http(s) url. Standard
                input is read when omitted.
            profile: Execution profile name, only 'local' is supported.
        """
        report = DispatchReport()
        try:
            Profile.parse(profile)
            status = self.precheck()
            self._writer.write_ok("Query precheck passed!")

            source = SourceResolver.resolve(query)
            text = read_source(source, timeout=self._settings.request_timeout)
            statements = split_statements(text)

            endpoint = build_query_endpoint(status, timeout=self._settings.request_timeout)
        except HttpsqlError as e:
            logger.debug(f"Query command aborted: {e!r}")
            self._writer.write_err(f"Query command error: {e}")
            report.error = e
            return report

        if not statements:
            self._writer.write_err(
                f"Query command error: no statements found in {source.describe()}"
            )
            endpoint.close()
            return report

        executor = self._executor_factory(endpoint)
        try:
            for statement in statements:
                self._run_statement(executor, statement, report)
        finally:
            executor.close()

        logger.info(
            f"Executed {report.statements} statements, "
            f"{report.succeeded} succeeded, {report.failed} failed"
        )
        return report

    def precheck(self) -> Status:
        """
        Check the local profile is usable on this machine.

        Raises:
            NoLocalConfigError: If no local query service is configured.
        """
        status = Status.read(self._settings)
        if not status.has_local_configs():
            raise NoLocalConfigError(config_dir=status.local_config_dir)
        return status

    def _run_statement(
        self, executor: ExecutorComponent, statement: str, report: DispatchReport
    ) -> None:
        report.statements += 1
        self._writer.write_ok(f"Execute query {statement} on {executor.url}")
        try:
            result = executor.execute(statement)
        except StatementError as e:
            self._writer.write_err(str(e))
            report.failed += 1
            report.failures.append(e)
            return

        self._report_result(result)
        report.succeeded += 1

    def _report_result(self, result: ExecutionResult) -> None:
        self._writer.writeln(render_result(result.response))
        stats_line = format_stats(result.response.stats, result.elapsed_ms)
        if stats_line is not None:
            self._writer.write_ok(stats_line)
