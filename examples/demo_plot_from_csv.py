"""
===========================================================
Matrix Heat-map Demo
===========================================================

Steps:
  1) Load a comma-separated matrix file
  2) Draw it as a heat-map
  3) Show it, or save it with --save

Usage
-----
    python3 examples/demo_plot_from_csv.py grid.txt --save grid.png
"""

# --- Imports --------------------------------------------------------------
import sys
import argparse
import matplotlib.pyplot as plt

from matrix_loader import load_matrix, MatrixLoadError
from matrix_loader.plotting import plot_matrix

# --- CLI -----------------------------------------------------------------
def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Matrix heat-map demo.")
    p.add_argument("path", help="Path to the matrix file.")
    p.add_argument("--save", type=str, default="",
                   help="Write the figure to this file instead of showing it.")
    p.add_argument("--title", type=str, default="Matrix")
    return p.parse_args(argv)

# --- Main ----------------------------------------------------------------
def main(argv=None):
    args = parse_args(argv if argv is not None else sys.argv[1:])

    try:
        M = load_matrix(args.path)
    except MatrixLoadError as err:
        print(f"[error] {err}")
        return 1
    print(f"[info] loaded {M.shape} from: {args.path}")

    ax = plot_matrix(M, title=args.title)
    if args.save:
        ax.figure.savefig(args.save, dpi=150)
        print(f"[info] saved figure to: {args.save}")
    else:
        plt.show()
    plt.close(ax.figure)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
