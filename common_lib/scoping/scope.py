"""Run a block of code within the "scope" of a resource.

A ``Scope`` wraps up the usual pattern::

    if resource.acquire():
        try:
            ...  # do some work while the resource is held
        finally:
            resource.release()

The try/finally form gets awkward when you want to compute a value while the
resource is held and use it after releasing. ``Scope.supply`` handles that::

    # As a member of your class:
    scope = Scope.always_acquires(lock, lambda l: l.acquire(), lambda l: l.release())

    # In a method that needs the resource
    next_id = scope.supply(lambda res: res.next_id())

For callers that prefer a ``with`` block there is ``Scope.twr``, and for one-off
use without a resource object there is ``run_scoped``.
"""

from __future__ import annotations

from contextlib import ExitStack
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from common_lib import get_module_logger

logger = get_module_logger()

T = TypeVar("T")
R = TypeVar("R")


class ScopeTwr(Generic[T]):
    """Context manager returned by ``Scope.twr``.

    The ``enter`` check has already run by the time you get one of these, so
    check ``acquired_resource`` inside the ``with`` block before using the
    resource::

        with scope.twr() as twr:
            if twr.acquired_resource:
                twr.resource.next_id()

    The release callback only runs if the resource was acquired, and at most
    once no matter how many times ``close`` is called.
    """

    def __init__(self, resource: T, acquired: bool, on_close: Callable[[T], Any]):
        self._resource = resource
        self._acquired = acquired
        self._on_close = on_close
        self._closed = False

    @property
    def resource(self) -> T:
        return self._resource

    @property
    def acquired_resource(self) -> bool:
        """True if the resource was acquired."""
        return self._acquired

    @property
    def is_closed(self) -> bool:
        """True once ``close`` has released the resource."""
        return self._closed

    def close(self) -> None:
        if self._acquired and not self._closed:
            self._on_close(self._resource)
            self._closed = True

    def __enter__(self) -> "ScopeTwr[T]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class Scope(Generic[T]):
    """Pairs a resource with callbacks that acquire and release it.

    Args:
        resource: The resource to acquire / release
        enter: Called with the resource, returns True if it was acquired
        exit: Called with the resource to release it after the block ran
    """

    def __init__(
        self,
        resource: T,
        enter: Callable[[T], bool],
        exit: Callable[[T], Any],
    ):
        self._resource = resource
        self._enter = enter
        self._exit = exit

    @classmethod
    def always_acquires(
        cls,
        resource: T,
        enter: Callable[[T], Any],
        exit: Callable[[T], Any],
    ) -> "Scope[T]":
        """Create a scope whose ``enter`` cannot fail.

        ``enter`` is called for its side effect only; its return value is
        ignored and the resource is treated as acquired.
        """
        def always_enter(res: T) -> bool:
            enter(res)
            return True

        return cls(resource, always_enter, exit)

    @property
    def resource(self) -> T:
        return self._resource

    def _try_enter(self) -> bool:
        acquired = bool(self._enter(self._resource))
        if not acquired:
            logger.debug(f"Could not acquire scope resource {self._resource!r}, skipping block")
        return acquired

    def run(self, block: Callable[[T], Any]) -> bool:
        """Acquire the resource, run ``block`` with it and release it.

        If the resource cannot be acquired ``block`` is never called.

        Returns:
            True if the resource was acquired (and ``block`` ran)
        """
        if self._try_enter():
            try:
                block(self._resource)
                return True
            finally:
                self._exit(self._resource)
        return False

    def supply(self, block: Callable[[T], R], default: Optional[R] = None) -> Optional[R]:
        """Same as ``run`` but returns the value returned by ``block``.

        Returns:
            The block's return value, or ``default`` if the resource could
            not be acquired
        """
        if self._try_enter():
            try:
                return block(self._resource)
            finally:
                self._exit(self._resource)
        return default

    def supply_optionally(self, block: Callable[[T], R]) -> Tuple[bool, Optional[R]]:
        """Same as ``supply`` but reports whether the block ran.

        Useful when ``block`` may legitimately return ``None``.

        Returns:
            ``(True, value)`` if the resource was acquired, else ``(False, None)``
        """
        if self._try_enter():
            try:
                return True, block(self._resource)
            finally:
                self._exit(self._resource)
        return False, None

    def twr(self) -> ScopeTwr[T]:
        """Try to acquire the resource now and return a ``ScopeTwr`` for a ``with`` block."""
        return ScopeTwr(self._resource, self._try_enter(), self._exit)


def run_scoped(
    acquire: Callable[[], bool],
    body: Callable[[], Any],
    release: Callable[[], Any],
) -> bool:
    """Run ``body`` only if ``acquire`` succeeds, always calling ``release`` afterwards.

    ``release`` runs even when ``body`` raises; the exception still propagates.

    Returns:
        True if ``acquire`` returned a truthy value and ``body`` ran
    """
    if not acquire():
        logger.debug("run_scoped: acquire check failed, body not run")
        return False

    with ExitStack() as stack:
        stack.callback(release)
        body()
    return True
