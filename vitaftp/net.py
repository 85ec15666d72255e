"""Plain HTTP(S) helpers: file size, response headers and downloads."""

from __future__ import annotations

import os
import ssl
import urllib.error
import urllib.request
from contextlib import contextmanager

__all__ = [
    "DownloadError",
    "get_download_file_size",
    "get_header_field",
    "download_file",
    "USER_AGENT",
    "CHUNK_SIZE",
]

USER_AGENT = "VitaLauncher/1.00 libhttp/1.1"
CHUNK_SIZE = 4096


class DownloadError(OSError):
    """Raised when a request or a download fails."""


def _ssl_context() -> ssl.SSLContext:
    # Server certificates are not verified.
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


@contextmanager
def _get(url):
    """Send a GET request and yield the response, whatever its status."""
    request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        response = urllib.request.urlopen(request, context=_ssl_context())
    except urllib.error.HTTPError as error:
        response = error
    except (urllib.error.URLError, OSError, ValueError) as error:
        raise DownloadError(f"request to {url} failed: {error}") from error
    with response:
        yield response


def get_download_file_size(url):
    """Return the Content-Length of ``url``, or None when the status is not 200.

    Raises :class:`DownloadError` when the request fails or a successful
    response carries no length.
    """
    with _get(url) as response:
        if response.getcode() != 200:
            return None
        length = response.headers.get("Content-Length")
    if length is None:
        raise DownloadError(f"no content length for {url}")
    try:
        return int(length)
    except ValueError as error:
        raise DownloadError(f"bad content length {length!r} for {url}") from error


def get_header_field(url, field):
    """Return the value of response header ``field``, or "" when absent."""
    with _get(url) as response:
        return response.headers.get(field, "")


def download_file(url, dst: str | os.PathLike[str]):
    """Save the body of ``url`` to ``dst`` and return the number of bytes written.

    Raises :class:`DownloadError` when the status is not 200 or the
    transfer fails.
    """
    with _get(url) as response:
        status = response.getcode()
        if status != 200:
            raise DownloadError(f"{url} answered with status {status}")
        written = 0
        try:
            with open(dst, "wb") as handle:
                for chunk in iter(lambda: response.read(CHUNK_SIZE), b""):
                    handle.write(chunk)
                    written += len(chunk)
        except OSError as error:
            raise DownloadError(f"download of {url} failed: {error}") from error
    return written