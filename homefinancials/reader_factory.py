"""Registry that creates bank statement readers by bank name or id."""

from __future__ import annotations

import threading
from typing import Any, Callable

from .commons import HomeFinancialsError
from .readers import BankReader, CanaraBankReader

ReaderFactoryFn = Callable[[], BankReader]

_registry: dict[str, ReaderFactoryFn] = {}
_lock = threading.Lock()


def _to_lower(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def register_reader(bank_name: str, factory: ReaderFactoryFn | None) -> None:
    """Register ``factory`` under ``bank_name`` (case-insensitive).

    Empty names and missing factories are ignored; an existing entry
    for the same name is replaced.
    """
    if not bank_name or factory is None:
        return
    key = _to_lower(bank_name)
    with _lock:
        _registry[key] = factory


def unregister_reader(bank_name: str) -> bool:
    """Remove the reader for ``bank_name``; return whether one was removed."""
    key = _to_lower(bank_name)
    with _lock:
        return _registry.pop(key, None) is not None


def create_by_bank_name(bank_name: str) -> BankReader | None:
    """Create a reader for ``bank_name``, or return ``None`` if unsupported."""
    key = _to_lower(bank_name)
    with _lock:
        factory = _registry.get(key)
    return None if factory is None else factory()


def create_by_bank_id(storage: Any, bank_id: int) -> BankReader | None:
    """Resolve ``bank_id`` to a name through ``storage`` and create its reader.

    Returns ``None`` when there is no storage, the id cannot be resolved,
    or no reader is registered for the bank.
    """
    if storage is None:
        return None
    try:
        name = storage.get_bank_name_by_id(bank_id)
    except HomeFinancialsError:
        return None
    return create_by_bank_name(name)


def list_registered() -> list[str]:
    """Return the registered bank names, lower-cased and sorted."""
    with _lock:
        return sorted(_registry)


register_reader("Canara", CanaraBankReader)