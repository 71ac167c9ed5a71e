from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class Document:
    """A parsed security.txt file."""
    contact: Tuple[str, ...]
    expires: datetime
    acknowledgments: Tuple[str, ...] = ()
    canonical: Tuple[str, ...] = ()
    encryption: str | None = None
    hiring: str | None = None
    policy: str | None = None
    preferred_languages: Tuple[str, ...] = ()

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once ``expires`` lies in the past.

        ``now`` defaults to the current UTC time; a naive ``now`` is taken as UTC.
        """
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return self.expires <= now


@dataclass(slots=True)
class DocumentDraft:
    """Mutable accumulator owned by a single parse call."""
    acknowledgments: List[str] = field(default_factory=list)
    canonical: List[str] = field(default_factory=list)
    contact: List[str] = field(default_factory=list)
    encryption: str | None = None
    hiring: str | None = None
    policy: str | None = None
    preferred_languages: List[str] = field(default_factory=list)
    expires: datetime | None = None

    def build(self) -> Document:
        if not self.contact:
            raise MissingFieldError("Contact")
        if self.expires is None:
            raise MissingFieldError("Expires")
        return Document(
            contact=tuple(self.contact),
            expires=self.expires,
            acknowledgments=tuple(self.acknowledgments),
            canonical=tuple(self.canonical),
            encryption=self.encryption,
            hiring=self.hiring,
            policy=self.policy,
            preferred_languages=tuple(self.preferred_languages),
        )


# --------------------------------------------------------------------------- #
# errors
# --------------------------------------------------------------------------- #

class SecurityTxtError(RuntimeError):
    """Base class; two errors are equal when kind and payload match."""

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class ParseError(SecurityTxtError):
    """Raised when a document violates the security.txt grammar."""
    pass


class UnknownLineError(ParseError):
    """Raised for a non-blank, non-comment line with no known field prefix."""

    def __init__(self, line: str):
        super().__init__(line)
        self.line = line

    def __str__(self) -> str:
        return f"Unknown line: {self.line}"


class DuplicateFieldError(ParseError):
    """Raised when Expires or Preferred-Languages occurs more than once."""

    def __init__(self, field: str):
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"{self.field} field must be present only once"


class InvalidExpiresError(ParseError):
    def __init__(self, value: str):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"Expires is not a valid RFC3339 date: {self.value!r}"


class MissingFieldError(ParseError):
    """Raised after the last line when a required field never appeared."""

    def __init__(self, field: str):
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"{self.field} must be present"


class ReadError(ParseError):
    """Raised when the underlying stream fails; the original error is chained."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"error while reading file: {self.message}"


class ResolutionError(SecurityTxtError):
    """Base class for failures while locating a document over the network."""
    pass


class InvalidLocationError(ResolutionError):
    def __init__(self, location: str, reason: str = ""):
        super().__init__(location, reason)
        self.location = location
        self.reason = reason

    def __str__(self) -> str:
        msg = f"unable to parse provided URL [{self.location}]"
        return f"{msg}: {self.reason}" if self.reason else msg


class TransportError(ResolutionError):
    """Raised by fetchers when no response could be obtained."""

    def __init__(self, location: str, message: str):
        super().__init__(location, message)
        self.location = location
        self.message = message

    def __str__(self) -> str:
        return f"request to [{self.location}] failed: {self.message}"


class StatusCodeError(ResolutionError):
    def __init__(self, status_code: int, location: str):
        super().__init__(status_code, location)
        self.status_code = status_code
        self.location = location

    def __str__(self) -> str:
        return f"Got non-200 response code - [{self.status_code}] when calling [{self.location}]"


@dataclass(frozen=True, slots=True)
class Attempt:
    location: str
    error: Exception


class ResolutionFailedError(ResolutionError):
    """Raised when every candidate location failed; ``attempts`` keeps them in order."""

    def __init__(self, attempts):
        attempts = tuple(attempts)
        super().__init__(attempts)
        self.attempts = attempts

    @property
    def errors(self) -> Tuple[Exception, ...]:
        return tuple(a.error for a in self.attempts)

    def __str__(self) -> str:
        lines = [f"{len(self.attempts)} error(s) occurred:"]
        lines += [f"\t* {a.location}: {a.error}" for a in self.attempts]
        return "\n".join(lines)
