from __future__ import annotations

import abc
from typing import Generic, TypeVar


S = TypeVar("S")


class Ring(Generic[S], metaclass=abc.ABCMeta):
    """Arithmetic capability for an element type.

    Matrices never own a ring; one is passed to each ``plus``/``times`` call.
    Implementations are expected to satisfy the usual ring laws (``sum`` is
    associative and commutative with ``zero()`` as identity, ``product`` is
    associative and distributes over ``sum``). Nothing here checks them.

    Operands may be ``None`` when a matrix has unset coordinates.
    """

    @abc.abstractmethod
    def zero(self) -> S:
        ...

    @abc.abstractmethod
    def sum(self, a: S, b: S) -> S:
        ...

    @abc.abstractmethod
    def product(self, a: S, b: S) -> S:
        ...
