"""What a slowmode command asks for."""

__all__ = ["Directive", "Query", "SetTo", "Invalid"]

from typing import Any, Optional, Union

from .duration import format_duration


class Query:
    """Asks for the channel's current slowmode."""

    def __init__(self, current: int) -> None:
        #: The channel's slowmode at the time of the query, in seconds.
        self.current = current

    @property
    def formatted(self) -> str:
        return format_duration(self.current)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return self.current == other.current

    def __hash__(self) -> int:
        return hash((Query, self.current))

    def __repr__(self) -> str:
        return f"Query({self.current!r})"


class SetTo:
    """Asks for the channel's slowmode to be changed."""

    def __init__(self, seconds: int) -> None:
        self.seconds = seconds

    @property
    def formatted(self) -> str:
        return format_duration(self.seconds)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SetTo):
            return NotImplemented
        return self.seconds == other.seconds

    def __hash__(self) -> int:
        return hash((SetTo, self.seconds))

    def __repr__(self) -> str:
        return f"SetTo({self.seconds!r})"


class Invalid:
    """A command that can't be carried out."""

    UNPARSEABLE = "unparseable duration"
    OUT_OF_RANGE = "out of range"

    def __init__(self, reason: str, *, error: Optional[Exception] = None) -> None:
        self.reason = reason

        #: The underlying error, if there was one (e.g. from parsing).
        self.error = error

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Invalid):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash((Invalid, self.reason))

    def __repr__(self) -> str:
        return f"Invalid({self.reason!r})"


Directive = Union[Query, SetTo, Invalid]
