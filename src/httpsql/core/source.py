"""Resolution of the user supplied query source into statement text."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

import requests

from .errors import SourceUnavailableError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiteralSource:
    """Query text given directly on the command line."""

    text: str

    def describe(self) -> str:
        return "literal text"

    def read(self, timeout: float | None = None) -> str:
        return self.text


@dataclass(frozen=True)
class FileSource:
    """Query text stored in a local file."""

    path: Path

    def describe(self) -> str:
        return f"file {self.path}"

    def read(self, timeout: float | None = None) -> str:
        try:
            buffer = self.path.read_bytes()
        except OSError as e:
            raise SourceUnavailableError(source=self.describe(), reason=str(e)) from e
        return buffer.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class UrlSource:
    """Query text fetched from an http(s) URL."""

    address: str

    def describe(self) -> str:
        return f"url {self.address}"

    def read(self, timeout: float | None = None) -> str:
        try:
            response = requests.get(self.address, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise SourceUnavailableError(source=self.describe(), reason=str(e)) from e

        # Undeclared charsets are read as UTF-8 like local files
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text


@dataclass(frozen=True)
class StdinSource:
    """Query text piped through standard input."""

    def describe(self) -> str:
        return "stdin"

    def read(self, timeout: float | None = None) -> str:
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(source=self.describe(), reason=str(e)) from e


QuerySource = Union[LiteralSource, FileSource, UrlSource, StdinSource]


class SourceResolver:
    """
    Resolves a source specifier to a QuerySource.

    Matchers are tried in registration order; the first match wins and
    anything unmatched is literal query text.
    """

    _resolvers: list[tuple[Callable[[str], bool], Callable[[str], QuerySource]]] = []

    @classmethod
    def register(
        cls,
        matcher: Callable[[str], bool],
        factory: Callable[[str], QuerySource],
    ) -> None:
        """Register a matcher and the source factory used when it matches."""
        cls._resolvers.append((matcher, factory))

    @classmethod
    def resolve(cls, value: str | None) -> QuerySource:
        """
        Resolve a source specifier.

        Returns:
            StdinSource when no value is given, otherwise the source built by
            the first matching resolver, falling back to LiteralSource.
        """
        if value is None:
            return StdinSource()

        for matcher, factory in cls._resolvers:
            if matcher(value):
                return factory(value)

        return LiteralSource(value)

    @classmethod
    def clear(cls) -> None:
        """Clear all resolvers (for testing)."""
        cls._resolvers.clear()


def _is_existing_path(value: str) -> bool:
    """Match strings naming an existing path. Invalid paths never match."""
    if not value:
        return False
    try:
        return Path(value).exists()
    except (OSError, ValueError):
        return False


# Register built-in resolver for local files
SourceResolver.register(_is_existing_path, lambda value: FileSource(Path(value)))


def _is_url(value: str) -> bool:
    return value.startswith("http://") or value.startswith("https://")


# Register built-in resolver for remote urls
SourceResolver.register(_is_url, UrlSource)


def read_source(source: QuerySource, timeout: float | None = None) -> str:
    """Perform the single blocking read of a resolved source."""
    logger.info(f"Reading query from {source.describe()}")
    return source.read(timeout=timeout)
