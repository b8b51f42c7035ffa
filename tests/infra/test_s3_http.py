"""Missing-object handling with a real boto3 client against a local endpoint."""

import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from objstore.common.config import Settings
from objstore.infra.storage import ObjectStore, build_s3_client, get_object, head_object

NO_SUCH_KEY_XML = (
    b'<?xml version="1.0" encoding="UTF-8"?>\n'
    b"<Error><Code>NoSuchKey</Code>"
    b"<Message>The specified key does not exist.</Message>"
    b"<Key>missing</Key><RequestId>test</RequestId></Error>"
)


class MissingObjectHandler(BaseHTTPRequestHandler):
    """Answers every key as missing, the way S3 does."""

    def do_HEAD(self):
        self.send_response(404)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def do_GET(self):
        self.send_response(404)
        self.send_header("Content-Type", "application/xml")
        self.send_header("Content-Length", str(len(NO_SUCH_KEY_XML)))
        self.end_headers()
        self.wfile.write(NO_SUCH_KEY_XML)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def endpoint_url(monkeypatch):
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")
    server = ThreadingHTTPServer(("127.0.0.1", 0), MissingObjectHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def s3_client(endpoint_url):
    return build_s3_client(
        Settings(
            S3_ENDPOINT_URL=endpoint_url,
            S3_ACCESS_KEY_ID="test-key",
            S3_SECRET_ACCESS_KEY="test-secret",
            S3_USE_SSL=False,
            S3_BUCKET="assets",
        )
    )


@pytest.mark.asyncio
async def test_head_object_missing_returns_none(s3_client):
    assert await head_object(s3_client, "assets", "missing") is None


@pytest.mark.asyncio
async def test_get_object_missing_returns_none(s3_client):
    assert await get_object(s3_client, "assets", "missing") is None


@pytest.mark.asyncio
async def test_exists_is_false_for_missing_object(s3_client):
    assert await ObjectStore(s3_client, "assets").exists("missing") is False
