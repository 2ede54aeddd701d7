"""Download a file over HTTP and store it on disk."""

from __future__ import annotations

import asyncio
import urllib.error
import urllib.request
from http import HTTPStatus
from pathlib import Path


class DownloadError(OSError):
    """Raised when a download cannot be fetched or written."""


def _status_text(code: int) -> str:
    try:
        return f"{code} {HTTPStatus(code).phrase}"
    except ValueError:
        return f"{code} <unknown status code>"


def _fetch(url: str) -> bytes:
    try:
        response = urllib.request.urlopen(url)
    except urllib.error.HTTPError as exc:
        raise DownloadError(
            f"HTTP request failed with status: {_status_text(exc.code)}"
        ) from exc
    except (urllib.error.URLError, ValueError, OSError) as exc:
        raise DownloadError(f"Failed to make request: {exc}") from exc

    with response:
        status = response.status
        if not 200 <= status <= 299:
            raise DownloadError(
                f"HTTP request failed with status: {_status_text(status)}"
            )
        try:
            return response.read()
        except OSError as exc:
            raise DownloadError(f"Failed to get bytes: {exc}") from exc


def _write(path: Path, data: bytes) -> None:
    try:
        handle = path.open("wb")
    except OSError as exc:
        raise DownloadError(f"Failed to create file: {exc}") from exc
    with handle:
        try:
            handle.write(data)
        except OSError as exc:
            raise DownloadError(f"Failed to write file: {exc}") from exc


async def download_file(url: str, output_path: str) -> None:
    """Fetch ``url`` and write its body to ``output_path``, creating parent directories."""
    data = await asyncio.to_thread(_fetch, url)

    path = Path(output_path)
    if not output_path or path.parent == path:
        raise DownloadError(f"Invalid path parent: {output_path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DownloadError(f"Failed to create directories: {exc}") from exc

    await asyncio.to_thread(_write, path, data)