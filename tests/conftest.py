import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest


class HookServer:
    """Local HTTP server that records each POST and replies with a canned response."""

    def __init__(self):
        self.requests = []
        self.status = 200
        self.body = b'{"ok": true}'
        self.content_type = "application/json"
        self._httpd = ThreadingHTTPServer(("127.0.0.1", 0), self._handler())
        self._thread = threading.Thread(target=self._httpd.serve_forever, daemon=True)

    @property
    def url(self):
        host, port = self._httpd.server_address[:2]
        return f"http://{host}:{port}"

    def respond(self, status, body="", content_type="text/plain"):
        self.status = status
        self.body = body.encode("utf-8")
        self.content_type = content_type

    def _handler(self):
        server = self

        class Handler(BaseHTTPRequestHandler):
            def do_POST(self):
                length = int(self.headers.get("Content-Length", 0))
                raw = self.rfile.read(length)
                server.requests.append(
                    {
                        "method": "POST",
                        "path": self.path,
                        "headers": dict(self.headers),
                        "json": json.loads(raw) if raw else None,
                    }
                )
                self.send_response(server.status)
                self.send_header("Content-Type", server.content_type)
                self.send_header("Content-Length", str(len(server.body)))
                self.end_headers()
                self.wfile.write(server.body)

            def log_message(self, format, *args):
                pass

        return Handler

    def start(self):
        self._thread.start()

    def stop(self):
        self._httpd.shutdown()
        self._httpd.server_close()


@pytest.fixture
def hook_server():
    server = HookServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture(autouse=True)
def clean_hook_env(monkeypatch):
    for name in (
        "HOOK_BASE_URL",
        "HOOK_SLUG",
        "HOOK_STATION_KEY",
        "HOOK_INSTANCE_ID",
        "HOOK_DATA",
        "HOOK_TIMEOUT",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
