"""Member contact records."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_SINCE = 0xFFFF


@dataclass(frozen=True)
class Contact:
    """A member's full name and the year they joined."""

    full_name: str
    since: int

    def __post_init__(self) -> None:
        if isinstance(self.since, bool) or not isinstance(self.since, int):
            raise TypeError("since must be an int")
        if not 0 <= self.since <= _MAX_SINCE:
            raise ValueError(f"since out of range: {self.since}")

    @classmethod
    def from_info(cls, full_name: str, since: int) -> "Contact":
        return cls(full_name, since)

    def print_member_age(self) -> str:
        """Print and return the membership line for this contact."""
        line = f"{self.full_name}, has been a memeber since {self.since}"
        print(line)
        return line

    def get_info(self) -> str:
        return f"{self.full_name} since : {self.since}"

    def card(self) -> str:
        """Business-card line for this contact."""
        return f"{self.full_name} - Member since: {self.since}"


def say_hello(coding: bool = True) -> str:
    """Print and return a greeting whose mood depends on coding."""
    mood = "happy" if coding else "sad"
    line = f"hello {mood}"
    print(line)
    return line