import logging
import sys
from dataclasses import dataclass

import requests

from content_types import type_to_extension
from errors import FileCreateError, FileWriteError, StreamReadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024
BAR_WIDTH = 20
DEFAULT_OUTPUT_STEM = 'output'


@dataclass
class Transfer:
    """One response body being copied to disk."""

    destination_path: str
    total_bytes: int = 0
    bytes_written: int = 0

    @property
    def percent(self):
        return calculate_percent(self.bytes_written, self.total_bytes)


def resolve_output_path(output, content_type):
    """
    Picks the destination file path for a download.

    An explicit output path is used verbatim. Otherwise the name is
    "output.<ext>" with the extension looked up from the exact
    Content-Type value; no header, or one that is not text, gives
    "output.txt".
    """
    if output:
        return output
    if isinstance(content_type, bytes):
        try:
            content_type = content_type.decode('ascii')
        except UnicodeDecodeError:
            content_type = None
    return f"{DEFAULT_OUTPUT_STEM}.{type_to_extension(content_type)}"


def content_length(headers):
    """Declared body size from the headers, 0 when missing or unparseable."""
    try:
        return max(int(headers.get('content-length', 0)), 0)
    except (TypeError, ValueError):
        return 0


def calculate_percent(bytes_written, total_bytes):
    # Unknown length reports 0% for every chunk.
    if total_bytes <= 0:
        return 0
    return min(bytes_written * 100 // total_bytes, 100)


def render_bar(percent):
    bars = percent // 5
    return f"Downloading: [{'=' * bars}{' ' * (BAR_WIDTH - bars)}] {percent:>3}%"


def print_downloading_bar(percent, out=None):
    """Redraws the progress bar in place on the current terminal line."""
    if out is None:
        out = sys.stdout
    out.write(f"\r{render_bar(percent)}")
    out.flush()


def write_chunks(chunks, total_bytes, destination, out=None):
    """
    Copies an iterable of byte chunks to destination, reporting progress.

    The file is created (or truncated) before the first chunk is pulled,
    so an empty body still leaves an empty file. An empty chunk ends the
    stream. Failures raise a DownloadError subclass and leave whatever
    was already written in place.

    Returns:
        The finished Transfer
    """
    if out is None:
        out = sys.stdout
    transfer = Transfer(destination_path=destination, total_bytes=total_bytes or 0)

    try:
        f = open(destination, 'wb')
    except OSError as e:
        raise FileCreateError(destination, e) from e

    with f:
        print_downloading_bar(0, out)
        chunks = iter(chunks)
        while True:
            try:
                chunk = next(chunks, b'')
            except (requests.exceptions.RequestException, OSError) as e:
                raise StreamReadError(destination, e) from e
            if not chunk:
                break

            try:
                written = f.write(chunk)
            except OSError as e:
                raise FileWriteError(destination, 'write failed', cause=e) from e
            if written != len(chunk):
                raise FileWriteError(
                    destination, f'short write ({written} of {len(chunk)} bytes)'
                )

            transfer.bytes_written += written
            print_downloading_bar(transfer.percent, out)

    out.write('\nDownloaded!\n')
    out.flush()
    return transfer


def download(response, output=None, out=None):
    """Streams a requests response body to a file and returns the Transfer."""
    destination = resolve_output_path(output, response.headers.get('Content-Type'))
    total_bytes = content_length(response.headers)
    logger.debug(f"Writing body to {destination} ({total_bytes or 'unknown'} bytes declared)")

    return write_chunks(
        response.iter_content(chunk_size=CHUNK_SIZE), total_bytes, destination, out
    )
