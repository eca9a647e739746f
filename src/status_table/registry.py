"""
HTTP status code registry.

The registry is built from a literal table of (code, reason) pairs and is
read-only once constructed. Renderers receive it by reference.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .status_class import StatusClass

logger = logging.getLogger(__name__)

# 306 ("Switch Proxy") is reserved and unused, so it is not listed.
STATUS_CODES: Tuple[Tuple[int, str], ...] = (
    # 1xx Informational
    (100, "Continue"),
    (101, "Switching Protocols"),
    (102, "Processing"),
    (103, "Early Hints"),
    # 2xx Success
    (200, "OK"),
    (201, "Created"),
    (202, "Accepted"),
    (203, "Non-Authoritative Information"),
    (204, "No Content"),
    (205, "Reset Content"),
    (206, "Partial Content"),
    (207, "Multi-Status"),
    (208, "Already Reported"),
    (226, "IM Used"),
    # 3xx Redirection
    (300, "Multiple Choices"),
    (301, "Moved Permanently"),
    (302, "Found"),
    (303, "See Other"),
    (304, "Not Modified"),
    (305, "Use Proxy"),
    (307, "Temporary Redirect"),
    (308, "Permanent Redirect"),
    # 4xx Client Error
    (400, "Bad Request"),
    (401, "Unauthorized"),
    (402, "Payment Required"),
    (403, "Forbidden"),
    (404, "Not Found"),
    (405, "Method Not Allowed"),
    (406, "Not Acceptable"),
    (407, "Proxy Authentication Required"),
    (408, "Request Timeout"),
    (409, "Conflict"),
    (410, "Gone"),
    (411, "Length Required"),
    (412, "Precondition Failed"),
    (413, "Payload Too Large"),
    (414, "URI Too Long"),
    (415, "Unsupported Media Type"),
    (416, "Range Not Satisfiable"),
    (417, "Expectation Failed"),
    (418, "I'm a teapot"),
    (421, "Misdirected Request"),
    (422, "Unprocessable Entity"),
    (423, "Locked"),
    (424, "Failed Dependency"),
    (425, "Too Early"),
    (426, "Upgrade Required"),
    (428, "Precondition Required"),
    (429, "Too Many Requests"),
    (431, "Request Header Fields Too Large"),
    (451, "Unavailable For Legal Reasons"),
    # 5xx Server Error
    (500, "Internal Server Error"),
    (501, "Not Implemented"),
    (502, "Bad Gateway"),
    (503, "Service Unavailable"),
    (504, "Gateway Timeout"),
    (505, "HTTP Version Not Supported"),
    (506, "Variant Also Negotiates"),
    (507, "Insufficient Storage"),
    (508, "Loop Detected"),
    (510, "Not Extended"),
    (511, "Network Authentication Required"),
)


@dataclass(frozen=True)
class StatusEntry:
    """A status code and its canonical reason phrase."""

    code: int
    reason: str

    def __post_init__(self):
        if not 100 <= self.code <= 599:
            raise ValueError(f"Status code out of range [100, 599]: {self.code}")
        if not self.reason or not self.reason.strip():
            raise ValueError(f"Empty reason phrase for status code {self.code}")

    @property
    def status_class(self) -> StatusClass:
        return StatusClass(self.code // 100)


class StatusRegistry:
    """Ordered, read-only collection of status entries keyed by code."""

    def __init__(self, entries: Iterable[StatusEntry]):
        """
        Build a registry from entries given in ascending code order.

        Args:
            entries: StatusEntry objects, strictly ascending by code.

        Raises:
            ValueError: If a code is duplicated or out of order.
        """
        self._entries: Tuple[StatusEntry, ...] = tuple(entries)

        previous: Optional[int] = None
        for entry in self._entries:
            if previous is not None and entry.code == previous:
                raise ValueError(f"Duplicate status code: {entry.code}")
            if previous is not None and entry.code < previous:
                raise ValueError(
                    f"Status codes out of order: {entry.code} follows {previous}"
                )
            previous = entry.code

        self._by_code: Mapping[int, str] = MappingProxyType(
            {entry.code: entry.reason for entry in self._entries}
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[StatusEntry]:
        return iter(self._entries)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __repr__(self) -> str:
        return f"StatusRegistry({len(self)} entries)"

    @property
    def entries(self) -> Tuple[StatusEntry, ...]:
        return self._entries

    def codes(self) -> List[int]:
        return [entry.code for entry in self._entries]

    def get(self, code: int) -> Optional[str]:
        """Return the reason phrase for a code, or None if the code is unknown."""
        return self._by_code.get(code)

    def reason(self, code: int) -> str:
        """
        Return the reason phrase for a code.

        Raises:
            KeyError: If the code is not in the registry.
        """
        try:
            return self._by_code[code]
        except KeyError:
            raise KeyError(f"Unknown status code: {code}") from None

    def by_class(self, status_class: StatusClass) -> List[StatusEntry]:
        return [entry for entry in self._entries if entry.status_class is status_class]

    def class_counts(self) -> Dict[StatusClass, int]:
        counts = {status_class: 0 for status_class in StatusClass}
        for entry in self._entries:
            counts[entry.status_class] += 1
        return counts

    def subset(self, codes: Iterable[int]) -> StatusRegistry:
        """
        Return a registry restricted to the given codes, in registry order.

        Codes that are not in the registry are skipped with a warning.
        """
        wanted = set()
        for code in codes:
            if code in self._by_code:
                wanted.add(code)
            else:
                logger.warning("Unknown status code %s, skipping", code)
        return StatusRegistry(entry for entry in self._entries if entry.code in wanted)

    def filter_class(self, status_class: StatusClass) -> StatusRegistry:
        return StatusRegistry(self.by_class(status_class))

    def to_dict(self) -> Dict[str, str]:
        """Map each code's decimal string to its reason phrase, ascending."""
        return {str(entry.code): entry.reason for entry in self._entries}


def build_registry() -> StatusRegistry:
    """Build the complete registry of known HTTP status codes."""
    registry = StatusRegistry(
        StatusEntry(code=code, reason=reason) for code, reason in STATUS_CODES
    )
    logger.debug("Built status registry with %d entries", len(registry))
    return registry
