"""Species registries that intern names into stable handles."""

from __future__ import annotations

import threading
from typing import Iterable, Iterator, Protocol

from rxnmatrix.errors import UnknownSpeciesError
from rxnmatrix.models import SpeciesHandle


class SpeciesRegistry(Protocol):
    def resolve(self, name: str) -> SpeciesHandle:
        """Return the handle for ``name``; the same name always yields the same handle."""
        ...


class InternedSpeciesRegistry:
    """In-memory registry handing out one :class:`SpeciesHandle` per distinct name.

    Args:
        known: Names registered up front, in order.
        allow_new: When false, resolving a name outside ``known`` raises
            :class:`UnknownSpeciesError` instead of allocating a handle.
    """

    def __init__(self, known: Iterable[str] = (), allow_new: bool = True) -> None:
        self._handles: dict[str, SpeciesHandle] = {}
        self._lock = threading.Lock()
        for name in known:
            self._intern(name.strip())
        self.allow_new = allow_new

    def resolve(self, name: str) -> SpeciesHandle:
        key = name.strip()
        handle = self._handles.get(key)
        if handle is not None:
            return handle
        if not self.allow_new:
            raise UnknownSpeciesError(key)
        with self._lock:
            return self._intern(key)

    def _intern(self, key: str) -> SpeciesHandle:
        handle = self._handles.get(key)
        if handle is None:
            handle = SpeciesHandle(index=len(self._handles), name=key)
            self._handles[key] = handle
        return handle

    def names(self) -> list[str]:
        return list(self._handles)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._handles

    def __iter__(self) -> Iterator[SpeciesHandle]:
        return iter(list(self._handles.values()))

    def __len__(self) -> int:
        return len(self._handles)
