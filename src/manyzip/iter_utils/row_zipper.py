import logging
from collections.abc import Iterable, Iterator
from typing import cast, final

from typing_extensions import override

from manyzip.utils.types import EXHAUSTED, Cursor, Exhausted, NestedIterable, Row

logger = logging.getLogger(__name__)

# marks an end-of-sequence from a single cursor inside one step
_END = object()


@final
class RowZipper[T](Iterator[Row[T]]):
    """
    streaming [[...T], [...T], ...] -> [ [T, T, ...], ... ]

    Like the builtin zip, but the number of inputs is only known at runtime
    and rows come out as lists. Stops for good as soon as any input ends.

    Every cursor is advanced exactly once per step, including the step that
    discovers the end, so cursors positioned after an exhausted one are still
    pulled once on that step. No cursor is touched after that.

    A zipper over zero inputs produces no rows.
    """

    def __init__(self, iterables: NestedIterable[T]):
        """
        Args:
            iterables: the inputs. The outer iterable is read immediately;
                inner ones are only turned into iterators, none of their
                elements are consumed here.
        """
        self._cursors: tuple[Cursor[T], ...] = tuple(iter(it) for it in iterables)
        self._exhausted: bool = False

    @property
    def arity(self) -> int:
        """number of inputs, and so the length of every row"""
        return len(self._cursors)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def step(self) -> Row[T] | Exhausted:
        """
        Produce the next row, or `EXHAUSTED` once any input has run out.

        Exceptions raised by an input's iterator propagate unchanged.
        """

        if self._exhausted:
            return EXHAUSTED

        if not self._cursors:
            self._exhausted = True
            return EXHAUSTED

        # no short-circuit: each cursor moves once even after one has ended
        row = [next(cursor, _END) for cursor in self._cursors]

        if any(item is _END for item in row):
            self._exhausted = True
            logger.debug("RowZipper exhausted (%d inputs)", self.arity)
            return EXHAUSTED

        return cast(Row[T], row)

    @override
    def __next__(self) -> Row[T]:
        row = self.step()

        if row is EXHAUSTED:
            raise StopIteration
        return cast(Row[T], row)

    @override
    def __iter__(self) -> Iterator[Row[T]]:
        return self

    @override
    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "active"
        return f"RowZipper(arity={self.arity}, {state})"


def manyzip[T](iterables: Iterable[Iterable[T]]) -> RowZipper[T]:
    """
    Zip any number of iterables into lists, in lockstep.

    >>> list(manyzip([[1, 2, 3], [4, 5], [6, 7, 8]]))
    [[1, 4, 6], [2, 5, 7]]
    """
    return RowZipper(iterables)
