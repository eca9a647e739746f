from __future__ import annotations

from enum import Enum
from typing import Optional


class StatusClass(Enum):
    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5

    @property
    def label(self) -> str:
        """Short label for the class, e.g. "4xx"."""
        return f"{self.value}xx"

    def contains(self, code: int) -> bool:
        return StatusClass.from_code(code) is self

    @staticmethod
    def from_code(code: int) -> Optional[StatusClass]:
        if 100 <= code <= 599:
            return StatusClass(code // 100)
        return None

    @staticmethod
    def from_label(label: str) -> StatusClass:
        """Parse "4xx", "4" or a member name such as "client_error".

        Raises:
            ValueError: If the label does not name a status class.
        """
        text = label.strip().lower()
        if text.endswith("xx"):
            text = text[:-2]
        if text.isdigit() and 1 <= int(text) <= 5:
            return StatusClass(int(text))
        for member in StatusClass:
            if member.name.lower() == text:
                return member
        valid = ", ".join(member.label for member in StatusClass)
        raise ValueError(f"Invalid status class '{label}'. Valid values are: {valid}")
