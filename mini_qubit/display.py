# mini_qubit/display.py
from typing import Optional
from .state import Qubit

def _fmt_complex(z: complex) -> str:
    sign = "-" if z.imag < 0 else "+"
    return f"({z.real + 0.0:.3f}{sign}{abs(z.imag):.3f}i)"  # +0.0 drops -0.0

def format_state(q: Qubit) -> str:
    """Two-line ket rendering: amplitudes, then probabilities in percent."""
    return (f"State: {_fmt_complex(q.alpha)}|0⟩ + {_fmt_complex(q.beta)}|1⟩\n"
            f"Probabilities: |0⟩: {q.prob_zero()*100:.1f}%, |1⟩: {q.prob_one()*100:.1f}%")

def display(q: Qubit, message: Optional[str] = None):
    if message is not None:
        print(f"\n{message}")
    print(format_state(q))
