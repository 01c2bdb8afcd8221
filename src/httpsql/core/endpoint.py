"""Query endpoint derived from the local status record."""

import ipaddress
import logging
from dataclasses import dataclass, field

import requests

from .config import Status
from .errors import EndpointBuildError, FeatureNotImplementedError, NoLocalConfigError
from .models import QueryConfig


logger = logging.getLogger(__name__)

STATEMENT_PATH = "/v1/statement"


@dataclass
class Endpoint:
    """HTTP session and submission url shared by every statement of a batch."""

    url: str
    session: requests.Session = field(default_factory=requests.Session, repr=False)
    timeout: float | None = None

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Endpoint":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def build_statement_url(query: QueryConfig) -> str:
    """
    Build the plaintext statement url of a query service.

    Raises:
        EndpointBuildError: If the host or port is malformed.
        FeatureNotImplementedError: If a TLS key or certificate is configured.
    """
    if query.tls_requested:
        # TODO: build an https endpoint once client certificates are supported
        raise FeatureNotImplementedError(feature="mTLS query endpoint")

    host = query.http_handler_host.strip()
    if not host:
        raise EndpointBuildError(reason=f"empty http handler host for '{query.name}'")
    if not 0 < query.http_handler_port < 65536:
        raise EndpointBuildError(
            reason=f"invalid http handler port {query.http_handler_port} for '{query.name}'"
        )

    try:
        address = ipaddress.ip_address(host)
    except ValueError:
        address = None
    if address is not None and address.version == 6:
        host = f"[{address}]"

    return f"http://{host}:{query.http_handler_port}{STATEMENT_PATH}"


def build_query_endpoint(status: Status, timeout: float | None = None) -> Endpoint:
    """
    Resolve the endpoint of the first configured local query service.

    Raises:
        NoLocalConfigError: If no local query service is configured.
        EndpointBuildError: If the configured address is malformed.
        FeatureNotImplementedError: If a secure channel is configured.
    """
    query_configs = status.get_local_query_configs()
    if not query_configs:
        raise NoLocalConfigError(config_dir=status.local_config_dir)

    query = query_configs[0]
    url = build_statement_url(query)
    logger.debug(f"Resolved query endpoint '{query.name}' to {url}")

    return Endpoint(url=url, timeout=timeout)
