from .types import EXHAUSTED, Cursor, Exhausted, NestedIterable, Row

__all__ = ["EXHAUSTED", "Cursor", "Exhausted", "NestedIterable", "Row"]
