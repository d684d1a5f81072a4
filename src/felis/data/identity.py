"""The identity type constructor."""

from __future__ import annotations

from typing import Generic, TypeVar

A = TypeVar("A")


class Id(Generic[A]):
    """Type key for the identity shape: a value of ``Id[A]`` is a plain ``A``.

    Never instantiated; resolve its instances with ``Monad.of(Id)``.
    """

    def __new__(cls, *args: object, **kwargs: object) -> Id[A]:
        raise TypeError("Id is a type key; its values are plain values")
