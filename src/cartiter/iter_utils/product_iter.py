import math
from collections.abc import Iterator
from logging import debug
from typing import Any, Self, cast, final

from cartiter.utils.types import CursorTuple, ListLike, is_list_like


@final
class ProductIterator[*Ts](Iterator[tuple[*Ts]]):
    """
    Forward cursor over the cartesian product of N borrowed sequences.

    [...A], [...B], [...C] -> (a, b, c) for every combination, in lexicographic
    order with the last sequence varying fastest, as if written as nested loops
    with the rightmost sequence innermost.

    State is three cursor tuples (current, begin, end), one cursor per sequence.
    Bounds are captured once at construction and never change. Advancing rolls
    the cursors over like the digits of a mixed-radix counter; a carry out of
    index 0 is never wrapped, so the iterator is finished exactly when index 0
    sits at its end bound.

    The sequences are borrowed, never copied. Mutating them while an iterator
    is alive is undefined.

    Usage, mirroring a begin/end loop:

        it = make_iterator([1, 2], "ab")
        end = it.end()
        while it != end:
            it.value      # (1, "a"), then (1, "b"), ...
            it.get(0)     # == it.value[0], without building the tuple
            it.advance()

    or simply `for a, b in make_iterator([1, 2], "ab"): ...`
    """

    def __init__(self, *seqs: ListLike[Any]):
        if not seqs:
            raise TypeError("ProductIterator requires at least one sequence")

        for i, seq in enumerate(seqs):
            if not is_list_like(seq):
                raise TypeError(
                    f"argument {i} ({type(seq).__name__}) is not sized and indexable"
                )

        self._seqs: tuple[ListLike[Any], ...] = seqs
        self._begin: CursorTuple = tuple(0 for _ in seqs)
        self._end: CursorTuple = tuple(len(seq) for seq in seqs)
        self._current: list[int] = list(self._begin)
        # materialized combined element for the current position, or None
        self._value: tuple[*Ts] | None = None

        if 0 in self._end:
            debug(f"ProductIterator: empty sequence among shape {self._end}")
            # nothing to visit; park at the sentinel position
            self._current[0] = self._end[0]

    @classmethod
    def _from_state(
        cls,
        seqs: tuple[ListLike[Any], ...],
        begin: CursorTuple,
        end: CursorTuple,
        current: list[int],
    ) -> "ProductIterator[*Ts]":
        it = cls.__new__(cls)
        it._seqs = seqs
        it._begin = begin
        it._end = end
        it._current = current
        it._value = None
        return it

    # --- sentinel & copies ---

    def end(self) -> "ProductIterator[*Ts]":
        """
        The matching end sentinel: index 0 parked at its end bound, every other
        index at its begin bound. Sequences are not re-scanned.
        """
        current = list(self._begin)
        current[0] = self._end[0]
        return self._from_state(self._seqs, self._begin, self._end, current)

    def copy(self) -> "ProductIterator[*Ts]":
        """Same position, independent cursor. The cached element is not copied."""
        return self._from_state(
            self._seqs, self._begin, self._end, list(self._current)
        )

    def __copy__(self) -> "ProductIterator[*Ts]":
        return self.copy()

    def assign(self, other: "ProductIterator[*Ts]") -> Self:
        """Takes on other's sequences, bounds and position; drops the cache."""
        if len(other._seqs) != len(self._seqs):
            raise ValueError(
                f"cannot assign a {len(other._seqs)}-way product iterator "
                f"to a {len(self._seqs)}-way one"
            )

        self._value = None
        self._seqs = other._seqs
        self._begin = other._begin
        self._end = other._end
        self._current = list(other._current)
        return self

    # --- movement ---

    def advance(self) -> Self:
        """
        Pre-increment. Moves to the next combination, or does nothing if the
        iterator is already at its end.
        """
        current = self._current
        end = self._end

        if current[0] == end[0]:
            return self

        # odometer, rightmost digit first
        i = len(current) - 1

        while True:
            current[i] += 1

            if current[i] != end[i] or i == 0:
                # index 0 stays at its end bound; that is the termination state
                break

            current[i] = self._begin[i]
            i -= 1

        self._value = None
        return self

    @property
    def at_end(self) -> bool:
        return self._current[0] == self._end[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductIterator):
            return NotImplemented

        # a cursor belongs to its container, so the containers must match too
        return (
            len(self._seqs) == len(other._seqs)
            and all(a is b for a, b in zip(self._seqs, other._seqs))
            and self._current == other._current
        )

    # --- element access ---

    @property
    def value(self) -> tuple[*Ts]:
        """
        The combined element at the current position.

        Built on first access after a move and reused until the next one, so
        repeated reads return the very same tuple. Reading at the end position
        is undefined.
        """
        if self._value is None:
            self._value = cast(
                tuple[*Ts],
                tuple(seq[pos] for seq, pos in zip(self._seqs, self._current)),
            )
        return self._value

    def get(self, index: int) -> Any:
        """
        A single field of the current combination, read straight from its
        sequence. Behaves like `self.value[index]` without building the tuple.
        """
        return self._seqs[index][self._current[index]]

    # --- python iteration protocol ---

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> tuple[*Ts]:
        if self.at_end:
            raise StopIteration

        item = self.value
        self.advance()
        return item

    # --- introspection ---

    @property
    def position(self) -> CursorTuple:
        """Current cursor (index) into each sequence."""
        return tuple(self._current)

    @property
    def shape(self) -> CursorTuple:
        """Sequence lengths, as captured at construction."""
        return self._end

    def ordinal(self) -> int:
        """
        Number of combinations visited before the current one. At the end this
        is the total number of combinations.
        """
        flat = 0

        # mixed radix; the sentinel layout (index 0 at its bound, rest at 0)
        # lands exactly on the cardinality
        for pos, bound in zip(self._current, self._end):
            flat = flat * bound + pos

        return flat

    def __length_hint__(self) -> int:
        return math.prod(self._end) - self.ordinal()

    def __repr__(self) -> str:
        return f"ProductIterator(position={self.position}, shape={self.shape})"


def make_iterator[*Ts](*seqs: ListLike[Any]) -> ProductIterator[*Ts]:
    """
    Builds a ProductIterator positioned at the first combination of `seqs`
    (or already at its end if any of them is empty).
    """
    return ProductIterator(*seqs)
