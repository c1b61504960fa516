"""Comparison and convergence tables (pandas) built on the numerics routines."""

from .tables import interpolation_table, ode_convergence_table, root_table

__all__ = ["ode_convergence_table", "interpolation_table", "root_table"]
