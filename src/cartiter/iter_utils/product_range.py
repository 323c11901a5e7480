import math
from collections.abc import Iterable, Iterator
from typing import Any, final, override

import numpy as np
from numpy.typing import NDArray

from cartiter.iter_utils.product_iter import ProductIterator
from cartiter.utils.types import CursorTuple, ListLike


@final
class ProductRange[*Ts](Iterable[tuple[*Ts]]):
    """
    Re-iterable view of the cartesian product of borrowed sequences.
    [...A], [...B] -> [... (a, b) ], last sequence varying fastest.

    Each loop over the range starts a fresh ProductIterator, so the range can
    be traversed any number of times. Lengths are read when the range is
    created; nothing is copied.
    """

    def __init__(self, *seqs: ListLike[Any]):
        # validates the arguments once, up front
        self._first: ProductIterator[*Ts] = ProductIterator(*seqs)

    def begin(self) -> ProductIterator[*Ts]:
        return self._first.copy()

    def end(self) -> ProductIterator[*Ts]:
        return self._first.end()

    @override
    def __iter__(self) -> Iterator[tuple[*Ts]]:
        return self.begin()

    def __len__(self) -> int:
        return math.prod(self.shape)

    @property
    def shape(self) -> CursorTuple:
        return self._first.shape

    def index_grid(self) -> NDArray[np.intp]:
        """
        Every position of the product as a (len, N) array of per-sequence
        indices, rows in iteration order.

        Row k holds `position` of the iterator after k advances.
        """
        shape = self.shape
        # C order flattening keeps the last axis fastest, same as iteration
        grid = np.indices(shape, dtype=np.intp)
        return grid.reshape(len(shape), math.prod(shape)).T

    def __repr__(self) -> str:
        return f"ProductRange(shape={self.shape})"


def product[*Ts](*seqs: ListLike[Any]) -> ProductRange[*Ts]:
    """Cartesian product of `seqs` as a re-iterable range."""
    return ProductRange(*seqs)
