import numpy as np
import pytest
from mini_qubit.state import Qubit, NORM_TOL

def total(q):
    return q.prob_zero() + q.prob_one()

def test_zero_state():
    q = Qubit.zero()
    assert abs(q.prob_zero() - 1.0) < NORM_TOL
    assert abs(q.prob_one()) < NORM_TOL
    assert q.alpha == 1 and q.beta == 0

def test_default_is_zero():
    q = Qubit()
    assert np.allclose(q.as_numpy(), Qubit.zero().as_numpy(), atol=0, rtol=0)
    assert q.dtype == np.complex128

def test_one_state():
    q = Qubit.one()
    assert abs(q.prob_zero()) < NORM_TOL
    assert abs(q.prob_one() - 1.0) < NORM_TOL

def test_normalize_3_4_5():
    q = Qubit(psi=np.array([3.0, 4.0], dtype=np.complex128))
    q.normalize()
    assert abs(total(q) - 1.0) < NORM_TOL
    assert abs(q.prob_zero() - 9/25) < NORM_TOL
    assert abs(q.prob_one() - 16/25) < NORM_TOL

def test_from_amplitudes_normalizes():
    q = Qubit.from_amplitudes(3, 4j)
    assert abs(q.prob_zero() - 9/25) < NORM_TOL
    assert abs(q.prob_one() - 16/25) < NORM_TOL
    q.check_normalized()

@pytest.mark.parametrize("alpha,beta", [(1, 1), (1j, -2), (0.1 + 0.2j, 0.3 - 0.4j), (1e-3, 0), (0, 5)])
def test_from_amplitudes_total_probability(alpha, beta):
    assert abs(total(Qubit.from_amplitudes(alpha, beta)) - 1.0) < NORM_TOL

def test_from_amplitudes_zero_vector_is_left_as_is():
    # degenerate input: normalization is skipped, no NaN
    q = Qubit.from_amplitudes(0, 0)
    assert q.alpha == 0 and q.beta == 0
    assert total(q) == 0.0
    assert not np.any(np.isnan(q.as_numpy()))

def test_normalize_below_guard_is_noop():
    q = Qubit(psi=np.array([1e-12, 0], dtype=np.complex128))
    q.normalize()
    assert q.alpha == 1e-12

def test_apply_gate_uses_old_pair():
    q = Qubit.from_amplitudes(0.6, 0.8)
    q.apply_gate(np.array([[1, 1], [1, -1]], dtype=np.complex128))
    assert np.allclose(q.as_numpy(), [1.4, -0.2], atol=1e-12, rtol=0)

def test_apply_gate_rejects_bad_shape():
    with pytest.raises(ValueError):
        Qubit.zero().apply_gate(np.eye(3))

def test_non_unitary_drift_is_detected():
    q = Qubit.zero()
    q.apply_gate(2 * np.eye(2))
    assert abs(q.norm2() - 4.0) < NORM_TOL
    with pytest.raises(AssertionError):
        q.check_normalized()

def test_amplitude_setters_and_copy():
    q = Qubit.zero()
    c = q.copy()
    q.alpha = 0
    q.beta = 1j
    assert q.prob_one() == 1.0
    assert c.prob_zero() == 1.0
