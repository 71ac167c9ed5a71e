from __future__ import annotations
import bisect
from typing import Dict, List, Tuple, Type

from .field_base import FieldRule


class FieldRegistry:
    def __init__(self) -> None:
        self._by_name: Dict[str, Type[FieldRule]] = {}
        self._rules: List[tuple[int, str, Type[FieldRule]]] = []   # sorted by priority

    # called from FieldRule.__init_subclass__
    def register(self, rule_cls: Type[FieldRule]) -> None:
        if rule_cls.name in self._by_name:
            raise ValueError(f"Field {rule_cls.name!r} is already registered")
        self._by_name[rule_cls.name] = rule_cls
        # (priority, name, cls) keeps ordering stable
        bisect.insort(self._rules, (rule_cls.priority, rule_cls.name, rule_cls))

    def names(self) -> list[str]:
        return [name for _, name, _ in self._rules]

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._rules)

    def match(self, line: str) -> Tuple[Type[FieldRule], str] | None:
        """Return (rule, value) for a line starting with a known ``Name:`` prefix."""
        # no field name contains ':' so the text before the first one is the candidate name
        name, sep, rest = line.partition(":")
        if not sep:
            return None
        rule = self._by_name.get(name)
        if rule is None:
            return None
        return rule, rest.strip(" ")


# singleton used project-wide
_REGISTRY = FieldRegistry()
