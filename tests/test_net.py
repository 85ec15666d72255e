import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from vitaftp.net import (
    USER_AGENT,
    DownloadError,
    download_file,
    get_download_file_size,
    get_header_field,
)

SMALL_BODY = b"hello from the test server\n"
LARGE_BODY = bytes(range(256)) * 50


class _Handler(BaseHTTPRequestHandler):
    def log_message(self, format, *args):
        pass

    def do_GET(self):
        if self.path == "/small":
            self._send(200, SMALL_BODY)
        elif self.path == "/large":
            self._send(200, LARGE_BODY)
        elif self.path == "/nolength":
            self.send_response(200)
            self.end_headers()
            self.wfile.write(SMALL_BODY)
        else:
            self._send(404, b"not found")

    def _send(self, status, body):
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.send_header("X-Custom", "custom-value")
        self.send_header("X-Agent", self.headers.get("User-Agent", ""))
        self.end_headers()
        self.wfile.write(body)


@pytest.fixture(scope="module")
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_size_of_existing_file(base_url):
    assert get_download_file_size(f"{base_url}/small") == len(SMALL_BODY)
    assert get_download_file_size(f"{base_url}/large") == len(LARGE_BODY)


def test_size_of_missing_file_is_none(base_url):
    assert get_download_file_size(f"{base_url}/missing") is None


def test_size_without_length_raises(base_url):
    with pytest.raises(DownloadError):
        get_download_file_size(f"{base_url}/nolength")


def test_header_field_is_case_insensitive(base_url):
    assert get_header_field(f"{base_url}/small", "X-Custom") == "custom-value"
    assert get_header_field(f"{base_url}/small", "x-custom") == "custom-value"


def test_absent_header_is_empty(base_url):
    assert get_header_field(f"{base_url}/small", "X-Nothing") == ""


def test_header_of_error_response_is_read(base_url):
    assert get_header_field(f"{base_url}/missing", "X-Custom") == "custom-value"


def test_user_agent_is_sent(base_url):
    assert get_header_field(f"{base_url}/small", "X-Agent") == USER_AGENT


def test_download_writes_body(base_url, tmp_path):
    dst = tmp_path / "small.bin"
    assert download_file(f"{base_url}/small", dst) == len(SMALL_BODY)
    assert dst.read_bytes() == SMALL_BODY


def test_download_of_large_body_is_intact(base_url, tmp_path):
    dst = tmp_path / "large.bin"
    assert download_file(f"{base_url}/large", dst) == len(LARGE_BODY)
    assert dst.read_bytes() == LARGE_BODY


def test_download_replaces_existing_file(base_url, tmp_path):
    dst = tmp_path / "target.bin"
    dst.write_bytes(b"x" * 10000)
    download_file(f"{base_url}/small", dst)
    assert dst.read_bytes() == SMALL_BODY


def test_download_of_missing_file_raises(base_url, tmp_path):
    dst = tmp_path / "missing.bin"
    with pytest.raises(DownloadError):
        download_file(f"{base_url}/missing", dst)
    assert not dst.exists()