# mini_qubit/gates.py
import numpy as np

def X(dtype=np.complex128) -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=dtype)

def Y(dtype=np.complex128) -> np.ndarray:
    return np.array([[0, -1j],
                     [1j, 0]], dtype=dtype)

def Z(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, -1]], dtype=dtype)

def H(dtype=np.complex128) -> np.ndarray:
    s = np.sqrt(0.5)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def S(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, 1j]], dtype=dtype)

def T(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, np.exp(0.25j*np.pi)]], dtype=dtype)

# Rotations, theta in radians (period 4*pi)
def RX(theta: float, dtype=np.complex128) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return np.array([[c, s],
                     [s, c]], dtype=dtype)

def RY(theta: float, dtype=np.complex128) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = np.sin(theta/2.0)
    return np.array([[c, -s],
                     [s, c]], dtype=dtype)

def RZ(theta: float, dtype=np.complex128) -> np.ndarray:
    return np.array([[np.exp(-0.5j*theta), 0],
                     [0, np.exp(+0.5j*theta)]], dtype=dtype)

FIXED_GATES = {"X": X, "Y": Y, "Z": Z, "H": H, "S": S, "T": T}
ROTATION_GATES = {"RX": RX, "RY": RY, "RZ": RZ}

def is_unitary(U: np.ndarray, tol=1e-10) -> bool:
    U = np.asarray(U)
    return U.shape == (2, 2) and np.allclose(U.conj().T @ U, np.eye(2), atol=tol, rtol=0)
