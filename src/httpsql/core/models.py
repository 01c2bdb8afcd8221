"""Pydantic models for the status record and the query service responses."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import FeatureNotImplementedError, UnsupportedProfileError


class Profile(str, Enum):
    """Execution target for a query invocation."""

    LOCAL = "local"
    CLUSTER = "cluster"

    @classmethod
    def parse(cls, value: str) -> "Profile":
        """
        Parse a user supplied profile name.

        Raises:
            UnsupportedProfileError: If the name is not a known profile.
            FeatureNotImplementedError: If the profile is known but not built yet.
        """
        try:
            profile = cls(value.strip().lower())
        except ValueError:
            raise UnsupportedProfileError(profile=value) from None

        if profile is cls.CLUSTER:
            raise FeatureNotImplementedError(feature="cluster profile")
        return profile


class QueryConfig(BaseModel):
    """HTTP handler settings of one local query service instance."""

    name: str = "query"
    http_handler_host: str = "127.0.0.1"
    http_handler_port: int = 8000
    api_tls_server_key: str = ""
    api_tls_server_cert: str = ""

    model_config = ConfigDict(extra="ignore")

    @property
    def tls_requested(self) -> bool:
        return bool(self.api_tls_server_key or self.api_tls_server_cert)


class LocalConfigs(BaseModel):
    query: list[QueryConfig] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class StatusRecord(BaseModel):
    """Persisted status of the locally configured services."""

    local_configs: LocalConfigs = Field(default_factory=LocalConfigs)

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def parse_empty(cls, data: Any) -> Any:
        """An empty YAML document or section loads as None."""
        if data is None:
            return {}
        if isinstance(data, dict) and data.get("local_configs") is None:
            return {**data, "local_configs": {}}
        return data


class ColumnField(BaseModel):
    """Descriptor of a single result column."""

    name: str
    data_type: Any = None

    model_config = ConfigDict(extra="ignore")


class ProgressStats(BaseModel):
    """Server reported counters describing the work done for one statement."""

    read_rows: int = Field(default=0, ge=0)
    read_bytes: int = Field(default=0, ge=0)

    model_config = ConfigDict(extra="ignore")


class QueryResponse(BaseModel):
    """
    Decoded body of a statement submission.

    Supports two formats for the columns:
    1. A plain list of field descriptors: columns: [{name: a}, ...]
    2. A schema object: columns: {fields: [{name: a}, ...]}
    """

    id: str | None = None
    state: str | None = None
    columns: list[ColumnField] | None = None
    data: list[list[Any]] | None = None
    stats: ProgressStats | None = None
    error: Any = None

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def parse_columns(cls, data: Any) -> Any:
        """Normalize the columns field to a list of field descriptors."""
        if not isinstance(data, dict):
            return data

        raw_columns = data.get("columns")
        if isinstance(raw_columns, dict):
            if "fields" not in raw_columns:
                raise ValueError(
                    f"Schema columns must have a 'fields' entry, "
                    f"got {list(raw_columns.keys())}"
                )
            return {**data, "columns": raw_columns["fields"]}

        return data

    @property
    def error_message(self) -> str | None:
        """Human readable form of the error field, if any."""
        if self.error is None:
            return None
        if isinstance(self.error, dict):
            message = self.error.get("message")
            code = self.error.get("code")
            if message is not None:
                return f"[{code}] {message}" if code is not None else str(message)
        return str(self.error)
