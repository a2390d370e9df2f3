"""
Complexity Catalogue
====================
Decorator-based registry of every example function with its Big-O profile.

Pattern modules decorate their public functions with ``@register(time=..., space=...)``.
The decorator returns the function unchanged, so the catalogue costs nothing at
call time. Importing ``algopatterns.patterns`` imports all pattern modules and
therefore fills the catalogue.
"""
from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

F = TypeVar("F", bound=Callable)

_REGISTRY: dict[str, CatalogueEntry] = {}


@dataclass(frozen=True)
class CatalogueEntry:
    name: str
    qualname: str
    module: str
    pattern: str
    time: str
    space: str
    summary: str = ""


def _summary(obj: Callable) -> str:
    doc = inspect.getdoc(obj)
    if not doc:
        return ""
    return doc.strip().splitlines()[0]


def register(time: str, space: str, pattern: Optional[str] = None) -> Callable[[F], F]:
    """
    Decorator recording a function (or class) in the catalogue.

    Args:
        time: Time complexity, e.g. "O(n log n)".
        space: Space complexity, e.g. "O(1)".
        pattern: Pattern name; defaults to the last part of the module name.

    Raises:
        ValueError: If a complexity string is empty or the key is taken by a
            different object.
    """
    if not time or not space:
        raise ValueError(f"Both time and space complexity are required, got time={time!r}, space={space!r}.")

    def decorator(obj: F) -> F:
        module = obj.__module__
        key = f"{module}.{obj.__qualname__}"
        existing = _REGISTRY.get(key)
        if existing is not None and (existing.time, existing.space) != (time, space):
            raise ValueError(f"'{key}' is already registered with a different profile.")

        _REGISTRY[key] = CatalogueEntry(
            name=obj.__name__,
            qualname=key,
            module=module,
            pattern=pattern or module.rsplit(".", 1)[-1],
            time=time,
            space=space,
            summary=_summary(obj),
        )
        return obj

    return decorator


def get_entry(name: str) -> CatalogueEntry:
    """
    Look up an entry by fully qualified name or, if unambiguous, by short name.

    Raises:
        KeyError: If nothing (or more than one entry) matches.
    """
    entry = _REGISTRY.get(name)
    if entry is not None:
        return entry

    matches = [e for e in _REGISTRY.values() if e.name == name]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        raise KeyError(f"No catalogue entry registered for '{name}'")
    raise KeyError(f"Ambiguous name '{name}', candidates: {sorted(e.qualname for e in matches)}")


def list_entries(pattern: Optional[str] = None) -> list[CatalogueEntry]:
    entries = [e for e in _REGISTRY.values() if pattern is None or e.pattern == pattern]
    return sorted(entries, key=lambda e: (e.pattern, e.qualname))


def list_patterns() -> list[str]:
    return sorted({e.pattern for e in _REGISTRY.values()})
