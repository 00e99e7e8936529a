"""Statistical checks on deck shuffling."""

from simulation.statistics import ShuffleStatistics, UniformityReport

__all__ = ["ShuffleStatistics", "UniformityReport"]
