"""Zip an arbitrary number of iterables into rows."""

from .iter_utils import RowZipper, manyzip
from .utils.types import EXHAUSTED, Exhausted, Row

__all__ = ["EXHAUSTED", "Exhausted", "Row", "RowZipper", "manyzip"]
