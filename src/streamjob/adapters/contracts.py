from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import ModuleType
from typing import TypeVar

T = TypeVar("T")


class AdapterLookupError(LookupError):
    pass


@dataclass(frozen=True, slots=True)
class AdapterMeta:
    # Named adapter factory contract; kind groups factories that build the same port.
    name: str
    kind: str | None


def adapter(*, name: str | None = None, kind: str | None = None) -> Callable[[T], T]:
    # Decorator attaches name/kind metadata to adapter factories.

    def _decorate(target: T) -> T:
        resolved_name = name
        if not isinstance(resolved_name, str) or not resolved_name:
            resolved_name = getattr(target, "__name__", "")
        setattr(target, "__adapter_meta__", AdapterMeta(name=resolved_name, kind=kind))
        return target

    return _decorate


def get_adapter_meta(target: object) -> AdapterMeta | None:
    # Read adapter contract metadata if present on callable/class target.
    meta = getattr(target, "__adapter_meta__", None)
    if isinstance(meta, AdapterMeta):
        return meta
    return None


def resolve_adapter(name: str, modules: list[ModuleType], *, kind: str | None = None) -> Callable[..., object]:
    # Find a factory by adapter name across modules; kind narrows the search when given.
    for module in modules:
        for value in module.__dict__.values():
            meta = get_adapter_meta(value)
            if meta is None or meta.name != name:
                continue
            if kind is not None and meta.kind != kind:
                continue
            return value
    raise AdapterLookupError(f"Unknown adapter '{name}'" + (f" of kind '{kind}'" if kind else ""))
