# mini_qubit/apply_serial.py
from .state import Qubit
from . import gates as G

# Every gate goes through Qubit.apply_gate; nothing here touches amplitudes.

def apply_X(state: Qubit) -> Qubit:
    state.apply_gate(G.X(dtype=state.dtype))
    return state

def apply_Y(state: Qubit) -> Qubit:
    state.apply_gate(G.Y(dtype=state.dtype))
    return state

def apply_Z(state: Qubit) -> Qubit:
    state.apply_gate(G.Z(dtype=state.dtype))
    return state

def apply_H(state: Qubit) -> Qubit:
    state.apply_gate(G.H(dtype=state.dtype))
    return state

def apply_S(state: Qubit) -> Qubit:
    state.apply_gate(G.S(dtype=state.dtype))
    return state

def apply_T(state: Qubit) -> Qubit:
    state.apply_gate(G.T(dtype=state.dtype))
    return state

def apply_RX(state: Qubit, theta: float) -> Qubit:
    state.apply_gate(G.RX(theta, dtype=state.dtype))
    return state

def apply_RY(state: Qubit, theta: float) -> Qubit:
    state.apply_gate(G.RY(theta, dtype=state.dtype))
    return state

def apply_RZ(state: Qubit, theta: float) -> Qubit:
    state.apply_gate(G.RZ(theta, dtype=state.dtype))
    return state

def apply_named(state: Qubit, name: str, theta=None) -> Qubit:
    """Apply a gate by name ("H", "RZ", ...); rotations need ``theta``."""
    key = name.upper()
    if key in G.FIXED_GATES:
        state.apply_gate(G.FIXED_GATES[key](dtype=state.dtype))
    elif key in G.ROTATION_GATES:
        if theta is None:
            raise ValueError(f"{key} needs a rotation angle")
        state.apply_gate(G.ROTATION_GATES[key](float(theta), dtype=state.dtype))
    else:
        raise ValueError(f"Unknown gate {name}")
    return state
