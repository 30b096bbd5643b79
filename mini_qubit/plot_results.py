# mini_qubit/plot_results.py
import argparse, os
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from .state import Qubit
from .apply_serial import apply_H, apply_named
from .logging import get_logger

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

log = get_logger(__name__)

def start_state(start: str) -> Qubit:
    if start == "zero":
        return Qubit.zero()
    if start == "one":
        return Qubit.one()
    if start == "plus":
        return apply_H(Qubit.zero())
    raise ValueError(f"Unknown start state {start}")

def sweep(gate: str, thetas, start: str = "zero"):
    """prob_zero / prob_one after one rotation from a fresh start state per angle."""
    p0 = np.empty(len(thetas))
    p1 = np.empty(len(thetas))
    for i, th in enumerate(thetas):
        q = apply_named(start_state(start), gate, th)
        p0[i] = q.prob_zero()
        p1[i] = q.prob_one()
    return p0, p1

def plot_sweep(gate: str, points: int = 97, start: str = "zero", out_dir: str = DATA_DIR) -> str:
    thetas = np.linspace(0.0, 4.0*np.pi, points)
    p0, p1 = sweep(gate, thetas, start)
    os.makedirs(out_dir, exist_ok=True)
    fig = plt.figure()
    plt.plot(thetas, p0, label="P(|0⟩)")
    plt.plot(thetas, p1, label="P(|1⟩)")
    plt.xlabel("θ (rad)")
    plt.ylabel("Probability")
    plt.ylim(-0.05, 1.05)
    plt.title(f"{gate.upper()}(θ) on |{start}⟩")
    plt.grid(True)
    plt.legend()
    path = os.path.join(out_dir, f"sweep_{gate.upper()}_{start}.png")
    plt.savefig(path, dpi=200)
    plt.close(fig)
    log.info("wrote %s", path)
    return path

def main(argv=None):
    p = argparse.ArgumentParser(description="mini_qubit rotation sweeps → data/*.png")
    p.add_argument("--gates", type=str, default="RX,RY,RZ")
    p.add_argument("--points", type=int, default=97)
    p.add_argument("--start", type=str, default="zero", choices=["zero", "one", "plus"])
    p.add_argument("--out", type=str, default=DATA_DIR)
    args = p.parse_args(argv)

    for g in args.gates.split(","):
        path = plot_sweep(g.strip(), args.points, args.start, args.out)
        print(f"✓ {path}")

if __name__ == "__main__":
    main()
