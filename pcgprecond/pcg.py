"""The preconditioned conjugate gradient method for sparse matrices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .preconditioner import IdentityPreconditioner, Preconditioner


@dataclass
class PcgSolution:
    """The result of a conjugate gradient run."""

    iterations: int
    solution: np.ndarray


def multiply(
    entries: Iterable[tuple[int, int, float]],
    x: Sequence[float],
    size: int | None = None,
) -> np.ndarray:
    """Return the product of a coordinate-form matrix with a dense vector."""
    x = np.asarray(x, dtype=float)
    result = np.zeros(len(x) if size is None else size)
    for row, col, value in entries:
        result[row] += value * x[col]
    return result


def solve(
    entries: Iterable[tuple[int, int, float]],
    b: Sequence[float],
    x0: Sequence[float] | None = None,
    preconditioner: Preconditioner | None = None,
    tol: float = 1e-6,
    max_iter: int = 1000,
) -> PcgSolution:
    """Solve A x = b for a symmetric positive definite A given as entries.

    Iteration stops once the residual norm falls below ``tol`` times the norm
    of ``b``, or after ``max_iter`` iterations.
    """
    entries = list(entries)
    b = np.asarray(b, dtype=float)
    size = len(b)
    if preconditioner is None:
        preconditioner = IdentityPreconditioner()
    x = np.zeros(size) if x0 is None else np.array(x0, dtype=float)

    threshold = tol * float(np.linalg.norm(b))
    r = b - multiply(entries, x, size)
    p = preconditioner.apply(r)
    rs_old = float(r @ p)

    iterations = 0
    while iterations < max_iter:
        if float(np.linalg.norm(r)) < threshold:
            break
        ap = multiply(entries, p, size)
        alpha = rs_old / float(p @ ap)
        x = x + alpha * p
        r = r - alpha * ap
        h = preconditioner.apply(r)
        rs_new = float(r @ h)
        p = h + (rs_new / rs_old) * p
        rs_old = rs_new
        iterations += 1

    return PcgSolution(iterations=iterations, solution=x)