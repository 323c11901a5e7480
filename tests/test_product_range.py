import itertools

import numpy as np

from cartiter import ProductRange, product


def test_range_iterates_repeatedly():
    prod = product([1, 2], "ab")
    expect = [(1, "a"), (1, "b"), (2, "a"), (2, "b")]
    assert list(prod) == expect
    assert list(prod) == expect
    assert len(prod) == 4


def test_begin_end():
    prod = product([1, 2], "ab", range(3))
    it, end = prod.begin(), prod.end()
    assert it == prod.begin()
    assert it is not prod.begin()
    assert end == it.end()

    count = 0
    while it != end:
        count += 1
        it.advance()

    assert count == len(prod) == 12


def test_empty_range():
    prod = product([1, 2, 3], [])
    assert len(prod) == 0
    assert list(prod) == []
    assert prod.begin() == prod.end()
    assert prod.index_grid().shape == (0, 2)


def test_shape():
    assert ProductRange("abc", [1, 2], [None]).shape == (3, 2, 1)


def test_index_grid_follows_iteration():
    seqs = ([5, 6, 7], "ab", (0.5, 1.5))
    prod = product(*seqs)
    grid = prod.index_grid()
    assert grid.shape == (len(prod), 3)

    it = prod.begin()
    for row in grid:
        assert tuple(row.tolist()) == it.position
        assert tuple(s[i] for s, i in zip(seqs, row)) == it.value
        it.advance()

    assert it.at_end


def test_index_grid_matches_itertools():
    shape = (2, 3, 2)
    grid = product(*(range(n) for n in shape)).index_grid()
    expect = np.array(list(itertools.product(*(range(n) for n in shape))))
    assert np.array_equal(grid, expect)
