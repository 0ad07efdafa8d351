from .row_zipper import RowZipper, manyzip

__all__ = ["RowZipper", "manyzip"]
