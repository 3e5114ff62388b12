# pcgprecond

A small library for solving symmetric positive definite sparse linear systems
with the preconditioned conjugate gradient (PCG) method, together with several
preconditioners that can be compared against each other:

- `IdentityPreconditioner` (`pcgprecond.preconditioner`): no preconditioning.
- `DIC` (`pcgprecond.dic`): diagonal incomplete Cholesky.
- `IlukMatlabOrder` (`pcgprecond.ilu_matlab`): ILU(k) with level of fill `k`,
  built from a matrix in compressed sparse row form.
- `IlukAlternativeOrder` (`pcgprecond.ilu_levels`): a row-wise incomplete
  factorisation that keeps a level of fill for every entry.

Matrices are given as iterables of `(row, col, value)` triples in coordinate
form with zero-based indices; `pcgprecond.entries.MatrixEntry` is a named tuple
of that shape.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from pcgprecond.entries import MatrixEntry
from pcgprecond.dic import DIC
from pcgprecond.ilu_matlab import IlukMatlabOrder
from pcgprecond.pcg import solve

entries = [
    MatrixEntry(0, 0, 4.0), MatrixEntry(0, 1, -1.0),
    MatrixEntry(1, 0, -1.0), MatrixEntry(1, 1, 4.0), MatrixEntry(1, 2, -1.0),
    MatrixEntry(2, 1, -1.0), MatrixEntry(2, 2, 4.0),
]
b = [1.0, 2.0, 3.0]

plain = solve(entries, b)
with_dic = solve(entries, b, preconditioner=DIC(entries, 3))
with_ilu = solve(entries, b, preconditioner=IlukMatlabOrder.from_entries(entries, 3, 1))

print(plain.iterations, with_dic.iterations, with_ilu.iterations)
print(with_ilu.solution)
```

`solve(entries, b, x0=None, preconditioner=None, tol=1e-6, max_iter=1000)`
returns a `PcgSolution` with the fields `iterations` and `solution`. It stops
once the residual norm falls below `tol` times the norm of `b`, or after
`max_iter` iterations. Without `x0` it starts from the zero vector; without a
preconditioner it uses `IdentityPreconditioner`. `multiply(entries, x, size)`
gives the matrix-vector product used by the solver.

## Preconditioners

Every preconditioner subclasses `Preconditioner` and provides
`apply(residual)`, which returns a new vector.

- `DIC(entries, size)` uses only the diagonal and the strictly upper entries
  of a symmetric matrix (see `entries.diagonal` and
  `entries.strict_upper_by_column`).
- `IlukMatlabOrder(values, col_index, row_ptr, level)` takes CSR arrays whose
  rows have ascending column indices; `IlukMatlabOrder.from_entries(entries,
  size, level)` builds them from coordinate entries. The factors are kept as
  `lower`, `lower_col`, `lower_row_ptr` (strict part of a unit lower factor) and
  `upper`, `upper_col`, `upper_row_ptr` (each row starting with its diagonal).
  Entries that come out exactly zero are not stored. Out-of-range entries or
  inconsistent arrays raise `ValueError`.
- `IlukAlternativeOrder(entries, size, level)` divides entries below the
  diagonal by the matrix's diagonal entry of their column, keeps entries on and
  above the diagonal as they are, and drops entries whose level exceeds
  `level`. The result is held in `lower`, `upper` and `levels`. Its building
  blocks, `sparse_row_subtraction_with_level` and `filter_entries`, return new
  `(entries, levels)` pairs.

## Forward and backward substitution

`forward_backward_substitution(residual, lower, upper)` applies factors held
as entry lists: `lower` is the strictly lower part of a unit lower triangular
factor and `upper` the upper factor including its diagonal, both sorted by row
and column. `forward_backward_substitution_csr(...)` does the same for factors
stored in compressed sparse row arrays.

## Timing

`pcgprecond.timing.Stopwatch(stream=None)` measures wall-clock time. Each call
to `checkout()` prints a numbered line with the milliseconds since the start
or the previous checkout to the given stream (standard output by default),
restarts the clock and returns the elapsed milliseconds.

## What this package does not do

It does not read or write matrix files (such as Matrix Market), and it has no
command-line program: matrices, right-hand sides and start vectors are passed
in from Python.