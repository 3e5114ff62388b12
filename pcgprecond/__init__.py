"""Preconditioned conjugate gradient solver with identity, DIC and ILU(k) preconditioners."""

__version__ = "0.1.0"