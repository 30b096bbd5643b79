# mini_qubit/demo.py
import argparse
import numpy as np
from .state import Qubit
from .apply_serial import (apply_H, apply_X, apply_Y, apply_Z, apply_S, apply_T,
                           apply_RX, apply_RY, apply_RZ)
from .display import display, format_state
from .logging import get_logger, set_log_level

log = get_logger(__name__)

def banner(title):
    print(f"\n═══ {title} ═══")

# ---------------------------------------------------------------------
# individual demos; each returns its final state

def demo_basic() -> Qubit:
    banner("Demo 1: Basic Gates")
    q = Qubit.zero()
    display(q, "Initial state: |0⟩")
    apply_H(q)
    display(q, "After Hadamard gate (H):")
    apply_X(q)
    display(q, "After Pauli-X gate (NOT):")
    apply_Z(q)
    display(q, "After Pauli-Z gate (phase flip):")
    return q

def demo_rotations() -> Qubit:
    banner("Demo 2: Rotation Gates")
    q = Qubit.zero()
    display(q, "Initial state: |0⟩")
    apply_RY(q, np.pi/4)
    display(q, "After RY(π/4):")
    apply_RX(q, np.pi/2)
    display(q, "After RX(π/2):")
    apply_RZ(q, np.pi/3)
    display(q, "After RZ(π/3):")
    return q

def demo_superposition() -> Qubit:
    banner("Demo 3: Creating Superposition")
    q = Qubit.zero()
    display(q, "Start with |0⟩:")
    apply_H(q)
    display(q, "Apply H → Equal superposition:")
    return q

def demo_phase() -> Qubit:
    banner("Demo 4: Phase Gates")
    q = apply_H(Qubit.zero())
    display(q, "Start with |+⟩ = H|0⟩:")
    apply_S(q)
    display(q, "After S gate (π/2 phase):")
    apply_T(q)
    display(q, "After T gate (π/4 phase):")
    return q

def demo_reversibility() -> Qubit:
    banner("Demo 5: Gate Reversibility")
    q = Qubit.zero()
    display(q, "Initial: |0⟩")
    for name, fn in (("H", apply_H), ("X", apply_X), ("Y", apply_Y)):
        fn(q)
        print(f"  → Apply {name}")
    print(format_state(q))

    print("\n  Reversing...")
    for name, fn in (("Y", apply_Y), ("X", apply_X), ("H", apply_H)):
        fn(q)
        print(f"  → Apply {name} (reverse)")
    display(q, "  Final state (should be |0⟩):")
    if abs(q.prob_zero() - 1.0) > 1e-10:
        log.warning("reversal did not return to |0>: prob_zero=%.12f", q.prob_zero())
    return q

DEMOS = {
    "basic": demo_basic,
    "rotations": demo_rotations,
    "superposition": demo_superposition,
    "phase": demo_phase,
    "reversibility": demo_reversibility,
}

# ---------------------------------------------------------------------
def main(argv=None):
    p = argparse.ArgumentParser(description="mini_qubit single-qubit gate demos")
    p.add_argument("demo", nargs="?", default="all", choices=[*DEMOS, "all"])
    p.add_argument("--log-level", type=str, default="WARNING")
    args = p.parse_args(argv)

    set_log_level(args.log_level)
    names = list(DEMOS) if args.demo == "all" else [args.demo]
    for name in names:
        log.info("running demo %s", name)
        q = DEMOS[name]()
        q.check_normalized()
    return 0

if __name__ == "__main__":
    main()
