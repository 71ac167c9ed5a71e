from __future__ import annotations

from typing import ClassVar

from ..core.model import DocumentDraft, DuplicateFieldError
from ..core.field_base import FieldRule


class PreferredLanguagesField(FieldRule):
    """Comma-separated language tags, allowed on a single line only.

    Tags are trimmed but not checked against RFC 5646.
    """

    name: ClassVar = "Preferred-Languages"
    priority: ClassVar = 80

    @classmethod
    def apply(cls, draft: DocumentDraft, value: str) -> None:
        if draft.preferred_languages:
            raise DuplicateFieldError(cls.name)
        draft.preferred_languages.extend(tag.strip(" ") for tag in value.split(","))
