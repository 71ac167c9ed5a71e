"""security_txt - parse and locate security.txt vulnerability-disclosure files."""

from .core.model import (                                             # re-export
    Attempt, Document, DuplicateFieldError, InvalidExpiresError,
    InvalidLocationError, MissingFieldError, ParseError, ReadError,
    ResolutionError, ResolutionFailedError, SecurityTxtError,
    StatusCodeError, TransportError, UnknownLineError,
)
from .core.registry import _REGISTRY                                  # singleton
from .parser import DocumentParser
from .resolver import LocationResolver, candidate_locations, WELL_KNOWN_PATHS

# default instances, never mutated after construction
_DEFAULT_PARSER = DocumentParser()
_DEFAULT_RESOLVER = LocationResolver(parser=_DEFAULT_PARSER)

parse = _DEFAULT_PARSER.parse
parse_text = _DEFAULT_PARSER.parse_text
parse_file = _DEFAULT_PARSER.parse_file


def resolve(location: str) -> Document:
    """Fetch and parse the document at ``location`` synchronously."""
    return _DEFAULT_RESOLVER.resolve(location)


async def resolve_async(location: str) -> Document:
    """Fetch and parse the document at ``location`` asynchronously."""
    return await _DEFAULT_RESOLVER.resolve_async(location)


__all__ = [
    "parse", "parse_text", "parse_file", "resolve", "resolve_async",
    "DocumentParser", "LocationResolver", "candidate_locations", "WELL_KNOWN_PATHS",
    "Document", "Attempt",
    "SecurityTxtError", "ParseError", "UnknownLineError", "DuplicateFieldError",
    "InvalidExpiresError", "MissingFieldError", "ReadError",
    "ResolutionError", "InvalidLocationError", "TransportError",
    "StatusCodeError", "ResolutionFailedError",
]
