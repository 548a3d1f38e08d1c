"""Small constructors for tuples, sets and dicts from varargs."""

from typing import Dict, Hashable, Set, Tuple, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def array_of(*args: T) -> Tuple[T, ...]:
    return args


def set_of(*args: K) -> Set[K]:
    return set(args)


def map_of(*args: K) -> Dict[K, K]:
    """Build a dict from alternating keys and values.

    Example:
        >>> map_of("k1", "v1", "k2", "v2")
        {'k1': 'v1', 'k2': 'v2'}

    Raises:
        ValueError: If given an odd number of arguments
    """
    if len(args) % 2 != 0:
        raise ValueError(f"map_of expects key/value pairs, got {len(args)} arguments")
    return dict(zip(args[::2], args[1::2]))
