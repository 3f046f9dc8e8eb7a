import os
import sys

import numpy as np
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from blas.level2 import NaiveLevel2
from blas.reference import ReferenceLevel2
from core.exceptions import DimensionMismatchError
from core.transposition import NoTranspose, Transpose
from matrix.dense import DenseMatrix, DenseVector


@pytest.mark.parametrize("trans", [NoTranspose, Transpose])
def test_naive_and_reference_agree_on_finite_inputs(trans):
    rng = np.random.default_rng(21)
    a_np = rng.normal(size=(6, 4))
    x_np = rng.normal(size=4 if trans is NoTranspose else 6)
    y_np = rng.normal(size=6 if trans is NoTranspose else 4)
    x_np[::2] = 0.0

    results = []
    for impl in (NaiveLevel2(), ReferenceLevel2()):
        y = DenseVector(y_np)
        impl.gemv(trans, 0.75, DenseMatrix.from_array(a_np), DenseVector(x_np), -2.0, y)
        results.append(y.to_array())

    np.testing.assert_allclose(results[0], results[1], rtol=1e-12, atol=1e-12)


def test_reference_ger_matches_naive():
    rng = np.random.default_rng(22)
    a_np = rng.normal(size=(3, 5))
    x_np = rng.normal(size=3)
    y_np = rng.normal(size=5)
    y_np[2] = 0.0

    results = []
    for impl in (NaiveLevel2(), ReferenceLevel2()):
        a = DenseMatrix.from_array(a_np)
        impl.ger(0.5, DenseVector(x_np), DenseVector(y_np), a)
        results.append(a.to_array())

    np.testing.assert_allclose(results[0], results[1], rtol=1e-13, atol=1e-13)


def test_reference_propagates_nan_through_zero_factors():
    a = DenseMatrix.from_rows([[1.0, np.nan]])
    y = DenseVector([np.inf])

    ReferenceLevel2().gemv(NoTranspose, 1.0, a, DenseVector([1.0, 0.0]), 0.0, y)

    assert np.isnan(y[0])


def test_reference_ger_propagates_inf_times_zero():
    a = DenseMatrix.from_rows([[1.0]])
    ReferenceLevel2().ger(1.0, DenseVector([np.inf]), DenseVector([0.0]), a)
    assert np.isnan(a[0, 0])


def test_reference_enforces_the_same_contract():
    y = DenseVector([1.0, 2.0])
    with pytest.raises(DimensionMismatchError):
        ReferenceLevel2().gemv(Transpose, 1.0, DenseMatrix(2, 3), DenseVector.zeros(2), 0.0, y)
    assert y.to_array().tolist() == [1.0, 2.0]

    with pytest.raises(TypeError):
        ReferenceLevel2().gemv("T", 1.0, DenseMatrix(2, 2), DenseVector.zeros(2), 0.0, y)
