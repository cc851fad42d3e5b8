"""Source classification: decide whether an argument names a URL or a file.

Both heuristics are ordered rule tables. Each rule inspects the raw string and
returns ``True``/``False`` to decide, or ``None`` to defer to the next rule.
The first decisive rule wins; when every rule defers the answer is ``False``.

Inputs such as ``host.name`` (no scheme, no path) satisfy both heuristics. The
dispatcher resolves that by preferring the local reading, so the result for
those strings is only as good as the extension-shape guess.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath, PureWindowsPath
from typing import Callable, Optional, Sequence
from urllib.parse import urlsplit

SCHEME_SEPARATOR = "://"
DEFAULT_SCHEME = "https://"

Rule = Callable[[str], Optional[bool]]

_PATH_SEPARATORS = re.compile(r"[\\/]")
_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")
# Characters a URL parser refuses inside a host name. Backslash has its own rule.
_FORBIDDEN_HOST_CHARS = frozenset("\t\n\r #<>?@[]^|")


class SourceMode(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


@dataclass(frozen=True)
class Classification:
    looks_like_url: bool
    looks_like_local_path: bool

    @property
    def mode(self) -> SourceMode:
        if self.looks_like_url and not self.looks_like_local_path:
            return SourceMode.REMOTE
        return SourceMode.LOCAL


# -- URL rules ---------------------------------------------------------------


def _has_http_scheme(value: str) -> Optional[bool]:
    if value.startswith(("http://", "https://")):
        return True
    return None


def _has_www_prefix(value: str) -> Optional[bool]:
    if value.startswith("www."):
        return True
    return None


def _has_leading_dot(value: str) -> Optional[bool]:
    if value.startswith("."):
        return False
    return None


def _has_dotted_host(value: str) -> Optional[bool]:
    host = parse_host(value)
    if host is None:
        return None
    if "." in host and not host.endswith(".") and "\\" not in host:
        return True
    return None


URL_RULES: tuple[tuple[str, Rule], ...] = (
    ("http_scheme", _has_http_scheme),
    ("www_prefix", _has_www_prefix),
    ("leading_dot", _has_leading_dot),
    ("dotted_host", _has_dotted_host),
)


# -- local path rules --------------------------------------------------------


def _is_absolute(value: str) -> Optional[bool]:
    if not value:
        return None
    if PurePosixPath(value).is_absolute() or PureWindowsPath(value).is_absolute():
        return True
    return None


def _has_separator(value: str) -> Optional[bool]:
    if not _PATH_SEPARATORS.search(value):
        return None
    if _DRIVE_PREFIX.match(value):
        return True
    if SCHEME_SEPARATOR not in value:
        return True
    return None


def _has_file_extension(value: str) -> Optional[bool]:
    if "." not in value or SCHEME_SEPARATOR in value or value.startswith("www."):
        return None
    segment = _PATH_SEPARATORS.split(value)[-1]
    if "." in segment and not segment.startswith("."):
        return True
    return None


LOCAL_PATH_RULES: tuple[tuple[str, Rule], ...] = (
    ("absolute_path", _is_absolute),
    ("path_separator", _has_separator),
    ("file_extension", _has_file_extension),
)


# -- public API --------------------------------------------------------------


def apply_rules(rules: Sequence[tuple[str, Rule]], value: str) -> tuple[bool, str | None]:
    """Run ``rules`` in order and return ``(decision, deciding_rule_name)``."""

    for name, rule in rules:
        decision = rule(value)
        if decision is not None:
            return decision, name
    return False, None


def looks_like_url(value: str) -> bool:
    return apply_rules(URL_RULES, value)[0]


def looks_like_local_path(value: str) -> bool:
    return apply_rules(LOCAL_PATH_RULES, value)[0]


def classify_source(value: str) -> Classification:
    return Classification(
        looks_like_url=looks_like_url(value),
        looks_like_local_path=looks_like_local_path(value),
    )


def normalize_url(value: str) -> str:
    """Prefix ``https://`` when the string carries no scheme separator."""

    if SCHEME_SEPARATOR in value:
        return value
    return f"{DEFAULT_SCHEME}{value}"


def parse_host(value: str) -> str | None:
    """Return the host of ``value`` read as a URL, or ``None`` if it has none.

    A string the URL parser rejects (bad port, unbalanced brackets, forbidden
    host characters) counts as having no host.
    """

    try:
        parsed = urlsplit(normalize_url(value))
        _ = parsed.port
    except ValueError:
        return None
    host = parsed.hostname
    if not host:
        return None
    if any(ch in _FORBIDDEN_HOST_CHARS for ch in host):
        return None
    return host


__all__ = [
    "Classification",
    "LOCAL_PATH_RULES",
    "SourceMode",
    "URL_RULES",
    "apply_rules",
    "classify_source",
    "looks_like_local_path",
    "looks_like_url",
    "normalize_url",
    "parse_host",
]
