from __future__ import annotations

from typing import ClassVar

from ..core.field_base import ListFieldRule


class AcknowledgmentsField(ListFieldRule):
    name: ClassVar = "Acknowledgments"
    attr: ClassVar = "acknowledgments"
    priority: ClassVar = 10


class CanonicalField(ListFieldRule):
    name: ClassVar = "Canonical"
    attr: ClassVar = "canonical"
    priority: ClassVar = 20


class ContactField(ListFieldRule):
    """Required; at least one occurrence per document."""
    name: ClassVar = "Contact"
    attr: ClassVar = "contact"
    priority: ClassVar = 30
