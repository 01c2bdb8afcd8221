"""Settings and the persisted local status record."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import NoLocalConfigError
from .models import QueryConfig, StatusRecord


logger = logging.getLogger(__name__)

HOME_ENV_VAR = "HTTPSQL_HOME"
TIMEOUT_ENV_VAR = "HTTPSQL_REQUEST_TIMEOUT"
DEFAULT_HOME = Path("~/.httpsql")
STATUS_FILE_NAME = "status.yaml"


class Settings(BaseModel):
    """Where the status record lives and how requests are issued."""

    home: Path = Field(default_factory=lambda: DEFAULT_HOME.expanduser())
    request_timeout: float | None = Field(default=None, gt=0)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from HTTPSQL_* environment variables."""
        values: dict[str, object] = {}
        if home := os.getenv(HOME_ENV_VAR):
            values["home"] = Path(home).expanduser()
        if timeout := os.getenv(TIMEOUT_ENV_VAR):
            values["request_timeout"] = timeout
        return cls.model_validate(values)

    @property
    def status_path(self) -> Path:
        return self.home / STATUS_FILE_NAME

    @property
    def local_config_dir(self) -> Path:
        return self.home / "local"


class Status:
    """Read-only view over the local status record."""

    def __init__(self, record: StatusRecord, local_config_dir: Path) -> None:
        self._record = record
        self.local_config_dir = local_config_dir

    @classmethod
    def read(cls, settings: Settings) -> "Status":
        """
        Load the status record for the given settings.

        A missing status file is treated as an empty record.

        Raises:
            NoLocalConfigError: If the record exists but cannot be parsed.
        """
        path = settings.status_path
        if not path.exists():
            logger.debug(f"No status record at {path}")
            return cls(StatusRecord(), settings.local_config_dir)

        try:
            raw = yaml.safe_load(path.read_text())
            record = StatusRecord.model_validate(raw)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            raise NoLocalConfigError(
                config_dir=settings.local_config_dir,
                reason=f"invalid status record {path}: {e}",
            ) from e

        return cls(record, settings.local_config_dir)

    def has_local_configs(self) -> bool:
        return len(self._record.local_configs.query) > 0

    def get_local_query_configs(self) -> list[QueryConfig]:
        return list(self._record.local_configs.query)
