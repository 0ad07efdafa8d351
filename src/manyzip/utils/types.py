from collections.abc import Iterable, Iterator
from typing import final

from typing_extensions import override

# one element per cursor, in cursor order
type Row[T] = list[T]

# a stateful "next element or end" source; anything `iter()` hands back
type Cursor[T] = Iterator[T]

type NestedIterable[T] = Iterable[Iterable[T]]


@final
class Exhausted:
    """
    Marker for "no more rows, and there never will be".
    Compare by identity with the module level `EXHAUSTED`.
    """

    @override
    def __repr__(self) -> str:
        return "EXHAUSTED"

    @override
    def __reduce__(self) -> str:
        # unpickles to the module level instance
        return "EXHAUSTED"


EXHAUSTED = Exhausted()
