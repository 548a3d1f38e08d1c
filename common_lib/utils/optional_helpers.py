"""Helpers for chains of fallbacks that may or may not produce a value."""

from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def first_of(*suppliers: Callable[[], Optional[T]]) -> Optional[T]:
    """Return the first non-``None`` result of ``suppliers``, called in order.

    Suppliers after the first one that produces a value are never called, so
    expensive lookups can be placed at the end of the chain::

        user = first_of(
            lambda: cache.get(user_id),
            lambda: db.load_user(user_id),
            lambda: remote.fetch_user(user_id),
        )

    Falsy values such as ``0`` or ``""`` count as present.

    Returns:
        The first present value, or ``None`` if every supplier returned ``None``
    """
    for supplier in suppliers:
        value = supplier()
        if value is not None:
            return value
    return None
