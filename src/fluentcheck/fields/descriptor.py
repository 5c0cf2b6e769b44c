"""Structural type descriptors: the fields an instance carries, per class level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

_MISSING = object()

_SLOT_EXCLUDES = frozenset({"__dict__", "__weakref__"})


@dataclass(frozen=True)
class FieldInfo:
    """A field of one instance.

    Attributes:
        name: Raw attribute name as stored on the instance.
        owner: Class level the field belongs to.
        in_dict: True for instance ``__dict__`` entries, False for slots.
    """

    name: str
    owner: type
    in_dict: bool = True

    def value_of(self, instance: Any) -> Any:
        if self.in_dict:
            return vars(instance)[self.name]
        return getattr(instance, self.name)


def _mangle(owner: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{owner.__name__.lstrip('_')}{name}"
    return name


def _declared_slots(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [_mangle(cls, slot) for slot in slots if slot not in _SLOT_EXCLUDES]


class StructuralDescriptor:
    """Fields of one instance grouped by class level, most-derived first."""

    def __init__(self, instance: Any):
        self.instance = instance
        self.levels = self._build_levels(instance)

    @staticmethod
    def _build_levels(instance: Any) -> list[tuple[FieldInfo, ...]]:
        cls = type(instance)
        levels: list[tuple[FieldInfo, ...]] = []
        for index, level_cls in enumerate(c for c in cls.__mro__ if c is not object):
            fields: list[FieldInfo] = []
            if index == 0:
                instance_dict = getattr(instance, "__dict__", None)
                if isinstance(instance_dict, dict):
                    fields.extend(FieldInfo(name, level_cls) for name in instance_dict)
            for slot in _declared_slots(level_cls):
                # unset slots are not fields of this instance
                if getattr(instance, slot, _MISSING) is not _MISSING:
                    fields.append(FieldInfo(slot, level_cls, in_dict=False))
            levels.append(tuple(fields))
        return levels

    def fields(self) -> Iterator[FieldInfo]:
        for level in self.levels:
            yield from level

    def __repr__(self) -> str:
        names = [f.name for f in self.fields()]
        return f"StructuralDescriptor({type(self.instance).__name__}, fields={names})"


def describe(instance: Any) -> StructuralDescriptor:
    return StructuralDescriptor(instance)


def has_fields(value: Any) -> bool:
    return next(describe(value).fields(), None) is not None


def implements_equality(value: Any) -> bool:
    """Whether the value's type defines its own ``__eq__``.

    Classes are compared by identity rather than walked.
    """
    if isinstance(value, type):
        return True
    return type(value).__eq__ is not object.__eq__
