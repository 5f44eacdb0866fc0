"""Access Log Analyzer - Log retrieval"""

import logging
from pathlib import Path
from typing import Optional

import requests

from .patterns import REQUEST_TIMEOUT, VERSION

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": f"access-log-analyzer/{VERSION}"}


class FetchError(Exception):
    """The log could not be retrieved"""

    def __init__(self, url: str, reason: Optional[str] = None,
                 status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        if status_code is not None:
            message = f"failed to download log file. Status code: {status_code}"
        else:
            message = f"error fetching log file: {reason}"
        super().__init__(message)


def download_log(url: str, timeout: float = REQUEST_TIMEOUT) -> str:
    """Return the body of *url* as text. Raises FetchError on any failure."""
    logger.info("Downloading log file from: %s", url)
    try:
        response = requests.get(url, headers=HEADERS, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(url, reason=str(exc)) from exc

    if response.status_code != 200:
        raise FetchError(url, status_code=response.status_code)

    return response.text


def read_log_file(filepath: str) -> str:
    path = Path(filepath)
    if not path.is_file():
        raise FetchError(filepath, reason=f"log file not found: {filepath}")

    logger.info("Reading log file: %s", path)
    with open(path, 'r', encoding='utf-8', errors='ignore') as f:
        return f.read()
