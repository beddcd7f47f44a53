"""Tagged success/failure results returned by the facet catalog port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from parts_finder.domain.errors import TransportError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    error: TransportError

    @property
    def ok(self) -> bool:
        return False


FetchResult = Union[Success[T], Failure]
