import numpy as np
import pytest

from strikeprint.pipeline.resample import resample


def test_empty():
    assert resample([], 100) == []


def test_single_element_is_copied():
    v = [1.0, 2.0, 3.0]
    out = resample([v], 7)
    assert out == [v] * 7


@pytest.mark.parametrize("n", [2, 5, 99, 100, 150, 301])
def test_length(n):
    seq = np.random.default_rng(n).normal(size=(n, 24))
    out = resample(seq, 100)
    assert len(out) == 100
    assert all(len(row) == 24 for row in out)
    assert out[0] == pytest.approx(seq[0])
    assert out[-1] == pytest.approx(seq[-1])


def test_linear_interpolation():
    out = resample([[0.0, 10.0], [1.0, 20.0]], 5)
    expected = np.array([[0.0, 10.0], [0.25, 12.5], [0.5, 15.0], [0.75, 17.5], [1.0, 20.0]])
    assert np.array(out) == pytest.approx(expected)


def test_scalars():
    assert resample([0.0, 3.0], 4) == pytest.approx([0.0, 1.0, 2.0, 3.0])


def test_stable_under_reresampling():
    seq = np.random.default_rng(1).normal(size=(100, 24))
    once = resample(seq, 100)
    assert np.array(once) == pytest.approx(seq)
    assert np.array(resample(once, 100)) == pytest.approx(np.array(once))


def test_degenerate_targets():
    assert resample([[1.0], [2.0]], 0) == []
    assert resample([[1.0], [2.0]], 1) == [[1.0]]
