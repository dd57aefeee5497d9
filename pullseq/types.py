from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Less = Callable[[T, T], bool]
Accumulator = Callable[[U, T], U]

# anything supporting + - * /, including numpy scalars
Numeric = Union[int, float, complex]


class Pair(NamedTuple, Generic[T, U]):
    """two possibly heterogeneous values, as produced by enumerate, over_map or pairwise"""
    first: T
    second: U


class _Closed:
    """marks a channel as closed. the same object is put back for every other receiver."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CLOSED"


CLOSED = _Closed()
