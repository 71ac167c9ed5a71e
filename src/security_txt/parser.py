"""Single-pass line grammar for security.txt documents."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterable, Union

from .core.model import Document, DocumentDraft, ReadError, UnknownLineError
from .core.registry import FieldRegistry, _REGISTRY
from .io.local import open_local_source

# Import fields to trigger registration
from . import fields  # noqa: F401

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


def _iter_lines(stream: Iterable) -> Iterable[str]:
    for raw in stream:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        yield raw


class DocumentParser:
    """Parses a line stream into a Document, failing on the first violation.

    No state survives between calls; one instance can be shared freely.
    """

    def __init__(self, registry: FieldRegistry | None = None) -> None:
        self.registry = registry if registry is not None else _REGISTRY

    def parse(self, stream: Iterable) -> Document:
        """Parse text or byte lines (a file object, StringIO, list, ...).

        A failing stream raises ReadError as soon as the read fails, before the
        Contact and Expires completeness checks run. A truncated read is
        therefore never reported as a missing field.
        """
        if isinstance(stream, (str, bytes, bytearray)):
            raise TypeError("parse() takes a stream of lines; use parse_text() for a string")
        draft = DocumentDraft()
        lines = _iter_lines(stream)

        while True:
            try:
                line = next(lines)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as e:
                raise ReadError(str(e)) from e

            line = line.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue

            matched = self.registry.match(line)
            if matched is None:
                raise UnknownLineError(line)
            rule, value = matched
            logger.debug("Matched %s field", rule.name)
            rule.apply(draft, value)

        return draft.build()

    def parse_text(self, text: str) -> Document:
        return self.parse(io.StringIO(text))

    def parse_file(self, source: Union[Path, str, BinaryIO]) -> Document:
        """Parse a path, closing it afterwards, or an already open file object."""
        with open_local_source(source) as stream:
            return self.parse(stream)
