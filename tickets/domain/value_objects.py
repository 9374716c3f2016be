"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketType(Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls[value]
        except KeyError:
            raise ValueError(f"Unknown ticket type: {value!r}") from None


@dataclass(frozen=True)
class AccountId:
    """Identifier of the account paying for a purchase."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be greater than zero")

    def __int__(self) -> int:
        return self.value
