import io
import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, Callable

import pytest
import yaml
from rich.console import Console

from httpsql.core import Settings, Writer


DEFAULT_RESULT = {
    "id": "query-1",
    "state": "Succeeded",
    "columns": [{"name": "number", "data_type": "UInt64"}],
    "data": [[1], [2], [3]],
    "stats": {"read_rows": 3, "read_bytes": 24},
}


class QueryServiceHandler(BaseHTTPRequestHandler):
    """Minimal query service: POST runs a statement, GET serves documents."""

    server: "QueryService"

    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        self.server.received.append(body)

        reply = self.server.responder(body)
        if reply is None:
            # Drop the connection without answering
            return

        status, payload = reply
        self._send(status, payload, "application/json")

    def do_GET(self) -> None:
        document = self.server.documents.get(self.path)
        if document is None:
            self._send(404, "not found", "text/plain")
            return
        self._send(200, document, "text/plain")

    def _send(self, status: int, payload: Any, content_type: str) -> None:
        if isinstance(payload, str):
            data = payload.encode("utf-8")
        else:
            data = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def log_message(self, format: str, *args: Any) -> None:
        pass


class QueryService(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self) -> None:
        super().__init__(("127.0.0.1", 0), QueryServiceHandler)
        self.received: list[str] = []
        self.documents: dict[str, str] = {}
        self.responder: Callable[[str], tuple[int, Any] | None] = (
            lambda body: (200, DEFAULT_RESULT)
        )

    @property
    def host(self) -> str:
        return self.server_address[0]

    @property
    def port(self) -> int:
        return self.server_address[1]

    def url(self, path: str) -> str:
        return f"http://{self.host}:{self.port}{path}"


@pytest.fixture
def query_service():
    service = QueryService()
    thread = threading.Thread(target=service.serve_forever, daemon=True)
    thread.start()
    yield service
    service.shutdown()
    service.server_close()
    thread.join()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(home=tmp_path / "home")


@pytest.fixture
def write_status(settings) -> Callable[..., Path]:
    """Write a status record with the given local query configs."""

    def _write(*queries: dict[str, Any]) -> Path:
        settings.home.mkdir(parents=True, exist_ok=True)
        record = {"local_configs": {"query": list(queries)}}
        settings.status_path.write_text(yaml.safe_dump(record))
        return settings.status_path

    return _write


@pytest.fixture
def local_status(write_status, query_service) -> Path:
    """Status record pointing at the running query service."""
    return write_status(
        {
            "name": "query_1",
            "http_handler_host": query_service.host,
            "http_handler_port": query_service.port,
            "api_tls_server_key": "",
            "api_tls_server_cert": "",
        }
    )


@pytest.fixture
def writer() -> Writer:
    console = Console(file=io.StringIO(), width=120, color_system=None)
    return Writer(console)
