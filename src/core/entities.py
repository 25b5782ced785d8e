"""Core Entities Module.

Defines the Person and Meeting dataclasses held by the entity store.

Both are immutable: a change to an entity is expressed by replacing it
wholesale, which keeps store snapshots safe to share between ledger
entries. Each kind defines a domain equality (``is_same_*``) that the
store uses to reject duplicates independently of identifiers and of
free-text fields such as meeting notes.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Optional, Sequence, Tuple

from src.core.exceptions import InvalidArgumentError

# strptime accepts single-digit fields, so each format is paired with a
# pattern fixing the exact digit count.
DATE_FORMATS = (
    (re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}"), "%d/%m/%Y"),
    (re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}"), "%d-%m-%Y"),
    (re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}"), "%Y-%m-%d"),
)
TIME_FORMATS = (
    (re.compile(r"[0-9]{4}"), "%H%M"),
    (re.compile(r"[0-9]{2}:[0-9]{2}"), "%H:%M"),
)
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
DISPLAY_TIME_FORMAT = "%H%M"


def _parse_strict(
    value: str, formats: Sequence[Tuple["re.Pattern[str]", str]]
) -> Optional[datetime]:
    for pattern, fmt in formats:
        if not pattern.fullmatch(value):
            continue
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_meeting_date(text: str) -> date:
    """
    Parses a meeting date using the accepted formats.

    Args:
        text: Raw date text, e.g. "20/11/2017".

    Returns:
        date: The parsed date.

    Raises:
        InvalidArgumentError: If no accepted format matches.
    """
    parsed = _parse_strict(text.strip(), DATE_FORMATS)
    if parsed is None:
        raise InvalidArgumentError(
            f"Invalid date '{text}'. Use DD/MM/YYYY, DD-MM-YYYY or YYYY-MM-DD."
        )
    return parsed.date()


def parse_meeting_time(text: str) -> time:
    """
    Parses a meeting time using the accepted formats.

    Args:
        text: Raw time text, e.g. "1800" or "18:00".

    Returns:
        time: The parsed time.

    Raises:
        InvalidArgumentError: If no accepted format matches.
    """
    parsed = _parse_strict(text.strip(), TIME_FORMATS)
    if parsed is None:
        raise InvalidArgumentError(f"Invalid time '{text}'. Use HHMM or HH:MM.")
    return parsed.time()


def parse_identifier(value: Any, label: str = "id") -> int:
    """
    Parses an entity identifier.

    Args:
        value: An int or its text form, plain ASCII digits only.
        label: Name used in the error message.

    Returns:
        int: The identifier, always positive.

    Raises:
        InvalidArgumentError: If the value is not a positive integer.
    """
    text = str(value).strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidArgumentError(f"Invalid {label} '{value}': expected a number.")
    identifier = int(text)
    if identifier <= 0:
        raise InvalidArgumentError(f"Invalid {label} '{value}': must be positive.")
    return identifier


@dataclass(frozen=True)
class Person:
    """
    Represents a contact that meetings can reference by id.
    """

    name: str
    phone: str = ""
    email: str = ""
    id: Optional[int] = None

    def is_same_person(self, other: "Person") -> bool:
        """
        Domain equality: same name (case-insensitive), phone and email.

        Args:
            other: The person to compare against.

        Returns:
            bool: True if both records describe the same person.
        """
        return (
            self.name.strip().casefold() == other.name.strip().casefold()
            and self.phone.strip() == other.phone.strip()
            and self.email.strip().casefold() == other.email.strip().casefold()
        )

    def __str__(self) -> str:
        parts = [f"#{self.id} {self.name}"]
        if self.phone:
            parts.append(f"Phone: {self.phone}")
        if self.email:
            parts.append(f"Email: {self.email}")
        return " ".join(parts)


@dataclass(frozen=True)
class Meeting:
    """
    Represents a meeting between one or more persons.

    ``person_ids`` references Person identifiers; the store guarantees
    each of them exists while the meeting is stored.
    """

    date: date
    time: time
    location: str
    notes: str = ""
    person_ids: Tuple[int, ...] = field(default_factory=tuple)
    id: Optional[int] = None

    def __post_init__(self):
        # Normalise to a duplicate-free tuple so instances stay hashable.
        object.__setattr__(
            self, "person_ids", tuple(dict.fromkeys(int(p) for p in self.person_ids))
        )

    def is_same_meeting(self, other: "Meeting") -> bool:
        """
        Domain equality: same date, time, location and participant set.

        Notes are free text and do not distinguish two meetings.
        """
        return (
            self.date == other.date
            and self.time == other.time
            and self.location.strip().casefold() == other.location.strip().casefold()
            and set(self.person_ids) == set(other.person_ids)
        )

    def __str__(self) -> str:
        persons = ", ".join(str(p) for p in self.person_ids)
        text = (
            f"Date: {self.date.strftime(DISPLAY_DATE_FORMAT)} "
            f"Time: {self.time.strftime(DISPLAY_TIME_FORMAT)} "
            f"Location: {self.location}"
        )
        if self.notes:
            text += f" Notes: {self.notes}"
        return text + f" Persons: {persons}"
