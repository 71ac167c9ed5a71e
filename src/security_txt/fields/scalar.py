from __future__ import annotations

from typing import ClassVar

from ..core.field_base import LastWinsFieldRule


class EncryptionField(LastWinsFieldRule):
    name: ClassVar = "Encryption"
    attr: ClassVar = "encryption"
    priority: ClassVar = 40


class HiringField(LastWinsFieldRule):
    name: ClassVar = "Hiring"
    attr: ClassVar = "hiring"
    priority: ClassVar = 50


class PolicyField(LastWinsFieldRule):
    name: ClassVar = "Policy"
    attr: ClassVar = "policy"
    priority: ClassVar = 70
