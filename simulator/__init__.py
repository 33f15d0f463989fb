"""Simulation driver: plays many deals and tallies ties and pushes."""

from .stats import SimulationStats, run_simulation

__all__ = ["SimulationStats", "run_simulation"]
