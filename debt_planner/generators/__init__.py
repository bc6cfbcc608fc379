"""Synthetic data generators."""

from debt_planner.generators.debt import DebtGenerator

__all__ = ["DebtGenerator"]
