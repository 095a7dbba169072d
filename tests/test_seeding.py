import numpy as np
import pytest

from parallel_kmeans import InvalidClusterCount, random_seeds, strided_seeds


def column(n):
    return np.arange(n, dtype=np.float64).reshape(n, 1)


def test_strided_seeds_default_stride():
    seeds = strided_seeds(column(1000), 3)

    assert seeds.ravel().tolist() == [100.0, 200.0, 300.0]


def test_strided_seeds_shrink_stride():
    assert strided_seeds(column(10), 3).ravel().tolist() == [2.0, 4.0, 6.0]
    assert strided_seeds(column(10), 9).ravel().tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]
    assert strided_seeds(column(4), 4).ravel().tolist() == [0.0, 1.0, 2.0, 3.0]


def test_strided_seeds_are_copies():
    data = column(10)
    seeds = strided_seeds(data, 2, stride=3)
    seeds[:] = -1.0

    assert seeds.shape == (2, 1)
    assert data[3, 0] == 3.0


@pytest.mark.parametrize("k", [0, -1, 11])
def test_invalid_k(k):
    with pytest.raises(InvalidClusterCount):
        strided_seeds(column(10), k)
    with pytest.raises(InvalidClusterCount):
        random_seeds(column(10), k)


def test_random_seeds_distinct_and_reproducible():
    data = column(50)

    seeds = random_seeds(data, 10, seed=7)

    assert len(np.unique(seeds)) == 10
    np.testing.assert_array_equal(seeds, random_seeds(data, 10, seed=7))
