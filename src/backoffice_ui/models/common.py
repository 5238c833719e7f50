"""
View-state models for the back office list screens.

These models describe what a list screen shows rather than what the
backend stores:

- FilterCriteria: month/year selector plus the free-text search box
- PageWindow: the slice of the filtered collection currently rendered
- Banner: transient success/error message with an expiry instant
- DialogState: which add/edit dialog is open and the draft it edits
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")
_YEAR_PATTERN = re.compile(r"^\d{4}$")


class DateMode(str, Enum):
    """How the date selector is compared against a record's date."""

    MONTH = "month"
    YEAR = "year"

    @classmethod
    def _missing_(cls, value: object) -> "DateMode | None":
        aliases = {"mes": cls.MONTH, "año": cls.YEAR, "ano": cls.YEAR}
        if isinstance(value, str):
            return aliases.get(value.strip().lower())
        return None


@dataclass(frozen=True)
class FilterCriteria:
    """
    Client-side filter applied to a freshly loaded collection.

    Attributes:
        date_mode: Compare by calendar month or by year.
        date_value: ``YYYY-MM`` in month mode, ``YYYY`` in year mode; empty
            disables the date filter.
        search: Substring matched against the resource's search field; empty
            disables the text filter.

    Raises:
        ValueError: If date_value does not match the selected mode.
    """

    date_mode: DateMode = DateMode.MONTH
    date_value: str = ""
    search: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "date_mode", DateMode(self.date_mode))
        object.__setattr__(self, "date_value", (self.date_value or "").strip())
        object.__setattr__(self, "search", self.search or "")
        if not self.date_value:
            return
        if self.date_mode is DateMode.MONTH:
            match = _MONTH_PATTERN.match(self.date_value)
            if not match or not 1 <= int(match.group(2)) <= 12:
                raise ValueError(f"Month filter must be YYYY-MM: {self.date_value!r}")
        elif not _YEAR_PATTERN.match(self.date_value):
            raise ValueError(f"Year filter must be YYYY: {self.date_value!r}")

    @property
    def year(self) -> int | None:
        """Selected year, or None when no date filter is set."""
        return int(self.date_value[:4]) if self.date_value else None

    @property
    def month(self) -> int | None:
        """Selected month (1-12) in month mode, otherwise None."""
        if not self.date_value or self.date_mode is DateMode.YEAR:
            return None
        return int(self.date_value[5:7])


@dataclass(slots=True)
class PageWindow(Generic[T]):
    """Represents the rendered page of a filtered collection."""

    items: Sequence[T]
    page: int
    total_pages: int
    total: int

    @property
    def is_empty(self) -> bool:
        """Return True when the "no records available" state should show."""
        return self.total == 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class BannerKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(slots=True)
class Banner:
    """
    Transient message shown above a list.

    Attributes:
        kind: Success or error.
        text: Message in Spanish, as shown to the user.
        expires_at: Clock reading after which the banner is hidden.
    """

    kind: BannerKind
    text: str
    expires_at: float

    def active(self, now: float) -> bool:
        """Return True while the banner should still be displayed."""
        return now < self.expires_at

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return {"kind": self.kind.value, "text": self.text, "expires_at": self.expires_at}


class DialogMode(str, Enum):
    NONE = "none"
    ADD = "add"
    EDIT = "edit"


@dataclass(slots=True)
class DialogState:
    """
    The add/edit dialog owned by a list screen.

    Attributes:
        mode: Which dialog is open, if any.
        record_id: Identifier of the record being edited.
        draft: Field values being edited, keyed by attribute name.
    """

    mode: DialogMode = DialogMode.NONE
    record_id: str | None = None
    draft: dict[str, Any] = field(default_factory=dict)

    @property
    def is_open(self) -> bool:
        return self.mode is not DialogMode.NONE
