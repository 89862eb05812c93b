"""Tests for dirstats.geometric.spread."""

import numpy as np
import pytest

from dirstats.errors import EmptyInputError
from dirstats.geometric import most_distant_points, most_distant_points_ix, vec_std


def test_most_distant_points_real():
    x = [2, 39, 17, 7, -90, 45, 105, -30, 26, -4]
    assert set(most_distant_points(x)) == {-90, 105}
    assert set(most_distant_points_ix(x)) == {4, 6}


def test_most_distant_points_complex_and_vectors():
    real = np.asarray([82, 10, 82, -111, -13, -63, 83, 5, 10, 3])
    imag = np.asarray([2, 39, 17, 7, -90, 45, 105, -30, 26, -4])
    x = real + 1j * imag
    assert set(most_distant_points(x)) == {83 + 105j, -13 - 90j}
    assert most_distant_points_ix(x) == (4, 6)

    vectors = np.column_stack((real, imag))
    first, second = most_distant_points(vectors)
    assert {tuple(first), tuple(second)} == {(83, 105), (-13, -90)}
    assert most_distant_points_ix(vectors) == (4, 6)


def test_most_distant_points_tie_picks_first_pair():
    assert most_distant_points_ix([0, 1, 0, 1]) == (0, 1)


def test_most_distant_points_bad_input():
    with pytest.raises(EmptyInputError):
        most_distant_points_ix([])
    with pytest.raises(ValueError, match="at least 2"):
        most_distant_points_ix([1.0])


def test_vec_std():
    np.random.seed(42)
    a = np.random.rand(10)
    assert vec_std(a) == pytest.approx(np.std(a, ddof=1))
    assert vec_std([[value] for value in a]) == pytest.approx(np.std(a, ddof=1))

    a = np.random.rand(10) + 1j * np.random.rand(10)
    expected = np.sqrt(np.sum(np.abs(a - np.mean(a)) ** 2) / 9)
    assert vec_std(a) == pytest.approx(expected)
    assert vec_std(np.column_stack((a.real, a.imag))) == pytest.approx(expected)


def test_vec_std_center():
    assert vec_std([1.0, 3.0], center=0.0) == pytest.approx(np.sqrt(10))
    assert vec_std([1j, -1j], center=0j) == pytest.approx(np.sqrt(2))
    assert vec_std(np.eye(2), center=np.zeros(2)) == pytest.approx(np.sqrt(2))
    with pytest.raises(ValueError, match="at least 2"):
        vec_std([1.0])
