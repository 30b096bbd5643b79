# mini_qubit/state.py
import numpy as np
from dataclasses import dataclass, field
from .logging import get_logger

NORM_TOL = 1e-10

log = get_logger(__name__)

def _zero_psi() -> np.ndarray:
    return np.array([1.0 + 0.0j, 0.0 + 0.0j], dtype=np.complex128)

@dataclass
class Qubit:
    psi: np.ndarray = field(default_factory=_zero_psi)  # shape (2,): [alpha, beta]

    @staticmethod
    def zero(dtype=np.complex128) -> "Qubit":
        psi = np.zeros(2, dtype=dtype)
        psi[0] = 1.0 + 0.0j
        return Qubit(psi=psi)

    @staticmethod
    def one(dtype=np.complex128) -> "Qubit":
        psi = np.zeros(2, dtype=dtype)
        psi[1] = 1.0 + 0.0j
        return Qubit(psi=psi)

    @staticmethod
    def from_amplitudes(alpha: complex, beta: complex, dtype=np.complex128) -> "Qubit":
        """Build a|0> + b|1> from amplitudes that need not be normalized."""
        q = Qubit(psi=np.array([alpha, beta], dtype=dtype))
        q.normalize()
        return q

    @property
    def dtype(self):
        return self.psi.dtype

    @property
    def alpha(self) -> complex:
        return complex(self.psi[0])

    @alpha.setter
    def alpha(self, value: complex):
        self.psi[0] = value

    @property
    def beta(self) -> complex:
        return complex(self.psi[1])

    @beta.setter
    def beta(self, value: complex):
        self.psi[1] = value

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def normalize(self):
        """Rescale to unit norm. Near-zero vectors are left untouched."""
        norm = np.sqrt(self.norm2())
        if norm > NORM_TOL:
            self.psi /= norm
        else:
            log.debug("normalize skipped: norm=%g <= %g", norm, NORM_TOL)

    def prob_zero(self) -> float:
        return float(abs(self.psi[0]) ** 2)

    def prob_one(self) -> float:
        return float(abs(self.psi[1]) ** 2)

    def apply_gate(self, U2: np.ndarray):
        """Apply a 2x2 matrix to (alpha, beta). Unitarity is not checked."""
        U2 = np.asarray(U2)
        if U2.shape != (2, 2):
            raise ValueError(f"gate must be 2x2, got shape {U2.shape}")
        a0 = self.psi[0]
        a1 = self.psi[1]
        # both outputs come from the old pair
        new0 = U2[0,0]*a0 + U2[0,1]*a1
        new1 = U2[1,0]*a0 + U2[1,1]*a1
        self.psi[0] = new0
        self.psi[1] = new1

    def check_normalized(self, tol=NORM_TOL):
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: |alpha|^2+|beta|^2={n2}")

    def copy(self) -> "Qubit":
        return Qubit(self.psi.copy())

    def as_numpy(self) -> np.ndarray:
        return self.psi
