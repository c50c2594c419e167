import pytest

from numvec.core.errors import EmptyVectorError, SizeMismatchError
from numvec.services.analysis import (
    NonFiniteResultError,
    combine,
    dot_product,
    normalized,
    vector_summary,
)


def test_vector_summary_basic():
    result = vector_summary([1, 2, 3, 4, 5])
    assert result["length"] == 5
    assert result["sum"] == 15
    assert result["product"] == 120
    assert result["mean"] == 3
    assert result["median"] == 3
    assert result["min"] == {"value": 1}
    assert result["max"] == {"value": 5}
    assert round(result["magnitude"], 3) == 7.416


def test_vector_summary_ties():
    result = vector_summary([1, 5, 5, 2])
    assert result["max"] == {"indices": [1, 2]}
    assert result["min"] == {"value": 1}


def test_vector_summary_empty():
    with pytest.raises(EmptyVectorError):
        vector_summary([])


def test_normalized():
    result = normalized([3, 4])
    assert result["magnitude"] == 5
    assert result["values"] == pytest.approx([0.6, 0.8])


def test_dot_product():
    assert dot_product([1, 2, 3], [4, 5, 6]) == 32


def test_combine():
    assert combine("cross", [1, 2, 3], [4, 5, 6]) == [-3, 6, -3]
    assert combine("concat", [1], [2, 3]) == [1, 2, 3]
    assert combine("subtract", [5, 5], [1, 2]) == [4, 3]


def test_combine_size_mismatch():
    with pytest.raises(SizeMismatchError):
        combine("add", [1, 2], [1])


def test_combine_unknown_operation():
    with pytest.raises(KeyError):
        combine("divide", [1], [1])


def test_vector_summary_overflow_rejected():
    with pytest.raises(NonFiniteResultError):
        vector_summary([1e200, 1e200])


def test_dot_product_overflow_rejected():
    with pytest.raises(NonFiniteResultError):
        dot_product([1e200], [1e200])


def test_combine_overflow_rejected():
    with pytest.raises(NonFiniteResultError):
        combine("add", [1.7e308], [1.7e308])
