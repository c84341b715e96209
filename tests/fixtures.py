"""
Common code for tests.
"""
import os
from pathlib import Path

import numpy as np


def sandbox_fname(base_name, ext):
    work_dir = "sandbox"
    Path(work_dir).mkdir(parents=True, exist_ok=True)
    return os.path.join(work_dir, f"{base_name}.{ext}")


quadratic_points = [
    [(0, 0), (1, 1), (2, 0)],
    [(0, 0), (1, 2), (3, 1)],
    [(-1.5, 0.5), (0.25, -2.0), (1.0, 1.75)],
]

cubic_points = [
    [(0, 0), (1, 2), (3, 2), (4, 0)],
    [(0, 0), (0, 1), (1, 1), (1, 0)],
    [(0.0, 0.0), (1.0, 3.0), (3.0, 4.0), (5.0, 1.0)],
]

# Control points 1, 2, 3 on the line y = x.
degenerate_cubic_points = [(0, 1), (1, 1), (2, 2), (3, 3)]

t_samples = np.linspace(0.0, 1.0, 11)
t_interior = np.linspace(0.05, 0.95, 10)


def rel_tol(poly, tol=1e-9):
    """
    Absolute tolerance for values of the polynomial, relative to its largest coefficient.
    """
    return tol * np.max(np.abs(poly.coefficients))
