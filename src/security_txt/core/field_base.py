from abc import ABC, abstractmethod
from typing import ClassVar

from .model import DocumentDraft


class FieldRule(ABC):
    # --- required by concrete subclasses ---
    name: ClassVar[str]                 # field name as written, e.g. "Contact"
    priority: ClassVar[int] = 100       # lower = listed earlier

    @classmethod
    def prefix(cls) -> str:
        return f"{cls.name}:"

    @classmethod
    @abstractmethod
    def apply(cls, draft: DocumentDraft, value: str) -> None:
        """Fold one occurrence of the field into ``draft`` or raise ParseError."""
        ...

    # --- registry hook ---
    def __init_subclass__(cls, register: bool = True, **kw):
        super().__init_subclass__(**kw)
        # intermediate bases carry no name of their own
        if not register or "name" not in cls.__dict__:
            return
        from .registry import _REGISTRY
        _REGISTRY.register(cls)           # noqa: E402


class ListFieldRule(FieldRule):
    """Appends every occurrence, keeping source order and duplicates."""
    attr: ClassVar[str]

    @classmethod
    def apply(cls, draft: DocumentDraft, value: str) -> None:
        getattr(draft, cls.attr).append(value)


class LastWinsFieldRule(FieldRule):
    """Single value; a repeated line silently replaces the previous one."""
    attr: ClassVar[str]

    @classmethod
    def apply(cls, draft: DocumentDraft, value: str) -> None:
        setattr(draft, cls.attr, value)
