"""Retrieve image bytes from the network or the filesystem and decode them."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import httpx

from .classify import Classification, SourceMode, classify_source, normalize_url
from .config import FetchConfig
from .errors import LoadError
from .image_utils import DecodedImage, decode_image
from .logging_utils import get_logger

Fetcher = Callable[[str], bytes]
Reader = Callable[[str], bytes]

_log = get_logger("sources")


def fetch_remote(
    url: str,
    *,
    config: FetchConfig | None = None,
    http_client: httpx.Client | None = None,
) -> bytes:
    """GET ``url`` and return the full body; non-2xx answers raise ``LoadError``."""

    config = config or FetchConfig()
    client = http_client
    close_client = False
    if client is None:
        client = httpx.Client(
            timeout=config.fetch_timeout_s,
            follow_redirects=config.follow_redirects,
            headers={"User-Agent": config.user_agent},
        )
        close_client = True

    try:
        response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise LoadError(f"Failed to fetch {url}: {exc}") from exc
    finally:
        if close_client:
            client.close()

    if not response.is_success:
        raise LoadError(
            f"Failed to fetch {url}: HTTP {response.status_code} {response.reason_phrase}".rstrip()
        )
    _log.info("Fetched {} bytes from {}", len(response.content), url)
    return response.content


def read_local(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise LoadError(f"Failed to open {path}: {exc}") from exc


class SourceDispatcher:
    """Turn a source specifier into a decoded image.

    Remote retrieval happens only when the string looks like a URL and does not
    look like a local path; everything else is read from disk.
    """

    def __init__(
        self,
        *,
        fetch: Optional[Fetcher] = None,
        read: Optional[Reader] = None,
        config: FetchConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or FetchConfig()
        self._http_client = http_client
        self._fetch = fetch or self._default_fetch
        self._read = read or read_local

    def _default_fetch(self, url: str) -> bytes:
        return fetch_remote(url, config=self._config, http_client=self._http_client)

    def retrieve(self, source: str, classification: Classification | None = None) -> bytes:
        classification = classification or classify_source(source)
        mode = classification.mode
        _log.debug(
            "Classified {!r}: url={} local={} -> {}",
            source,
            classification.looks_like_url,
            classification.looks_like_local_path,
            mode.value,
        )
        if mode is SourceMode.REMOTE:
            return self._fetch(normalize_url(source))
        return self._read(source)

    def load(self, source: str, classification: Classification | None = None) -> DecodedImage:
        data = self.retrieve(source, classification)
        try:
            image = decode_image(data)
        except ValueError as exc:
            raise LoadError(f"Failed to decode {source}: {exc}") from exc
        _log.debug("Decoded {} as {}x{}", source, image.width, image.height)
        return image


def load_image(
    source: str,
    classification: Classification | None = None,
    *,
    config: FetchConfig | None = None,
    http_client: httpx.Client | None = None,
) -> DecodedImage:
    dispatcher = SourceDispatcher(config=config, http_client=http_client)
    return dispatcher.load(source, classification)


__all__ = ["SourceDispatcher", "fetch_remote", "load_image", "read_local"]
