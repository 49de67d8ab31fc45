"""Input trajectories and their matrix form (one column per time step)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Sequence

import numpy as np

from optctl.common import ConfigError

__all__ = ["InputTrajectory"]


def _input_vector(value: Any) -> np.ndarray:
    if hasattr(value, "to_vector"):
        return np.asarray(value.to_vector(), dtype=float).ravel()
    return np.asarray(value, dtype=float).ravel()


@dataclass
class InputTrajectory:
    """An ordered sequence of control inputs, one per time step."""

    inputs: list = field(default_factory=list)

    @classmethod
    def from_matrix(
        cls, matrix: Any, factory: Callable[[Sequence[float]], Any]
    ) -> "InputTrajectory":
        """Build a trajectory from a matrix whose columns are the inputs."""
        array = np.asarray(matrix, dtype=float)
        if array.ndim != 2:
            raise ConfigError("Input matrix must be two-dimensional")
        if array.size == 0:
            raise ConfigError("Input matrix cannot be empty")
        return cls([factory([float(v) for v in column]) for column in array.T])

    def to_matrix(self) -> np.ndarray:
        """Return the inputs as a matrix, one column per input."""
        if not self.inputs:
            return np.zeros((0, 0))
        columns = [_input_vector(value) for value in self.inputs]
        if len({column.size for column in columns}) != 1:
            raise ConfigError("All inputs must have the same dimension")
        return np.column_stack(columns)

    def __len__(self) -> int:
        return len(self.inputs)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inputs)