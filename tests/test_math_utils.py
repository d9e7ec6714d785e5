"""
statistical primitives and the small vector helpers shared by every model
"""
import math
import pytest
from wlrate.utils import normal
from wlrate.utils.math_utils import matrix_transpose, normalize, sigmoid_scalar, unwind, v, w, vt, wt


def test_normal_functions():
    assert normal.cdf(0.0) == pytest.approx(0.5)
    assert normal.pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))
    assert normal.inv_cdf(0.975) == pytest.approx(1.959964, rel=1e-6)
    assert normal.inv_cdf(normal.cdf(0.3)) == pytest.approx(0.3)


def test_sigmoid_scalar():
    assert sigmoid_scalar(0.0) == 0.5
    assert sigmoid_scalar(2.0) == pytest.approx(1.0 - sigmoid_scalar(-2.0))
    # large magnitudes must not overflow math.exp
    assert sigmoid_scalar(-1000.0) == pytest.approx(0.0)
    assert sigmoid_scalar(1000.0) == pytest.approx(1.0)


def test_normalize():
    assert normalize([1, 2, 3], 1, 2) == pytest.approx([1.0, 1.5, 2.0])
    assert normalize([5, 5, 5], 1, 2) == [1.0, 1.0, 1.0]
    assert normalize([], 1, 2) == []


def test_matrix_transpose():
    assert matrix_transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]
    assert matrix_transpose([]) == []
    assert matrix_transpose([[]]) == []


def test_unwind_restores_order():
    sorted_objects, order = unwind([2, 0, 1], ['a', 'b', 'c'])
    assert sorted_objects == ['b', 'c', 'a']
    assert order == [1, 2, 0]
    restored, _ = unwind(order, sorted_objects)
    assert restored == ['a', 'b', 'c']


def test_unwind_is_stable_for_ties():
    sorted_objects, order = unwind([1, 0, 1], ['a', 'b', 'c'])
    assert sorted_objects == ['b', 'a', 'c']
    assert order == [1, 0, 2]
    assert unwind([], []) == ([], [])


def test_v_and_w():
    assert v(0.0, 0.0) == pytest.approx(math.sqrt(2.0 / math.pi))
    assert w(0.0, 0.0) == pytest.approx(2.0 / math.pi)
    # v shrinks as the winner was more expected to win
    assert v(1.0, 0.1) < v(0.0, 0.1) < v(-1.0, 0.1)


def test_v_and_w_degenerate():
    assert v(-50.0, 0.0) == pytest.approx(50.0)
    assert w(-50.0, 0.0) == 1.0
    assert w(50.0, 0.0) == pytest.approx(0.0)


def test_vt_and_wt():
    assert vt(0.0, 1.0) == pytest.approx(0.0)
    assert vt(1.0, 0.5) == pytest.approx(-vt(-1.0, 0.5))
    assert 0.0 < wt(0.0, 1.0) < 1.0


def test_vt_and_wt_degenerate():
    assert vt(10.0, 0.001) == pytest.approx(-9.999)
    assert vt(-10.0, 0.001) == pytest.approx(9.999)
    assert wt(50.0, 0.001) == 1.0
