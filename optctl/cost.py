"""Quadratic cost functions over state and input trajectories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np

from optctl.common import ConfigError

__all__ = ["CostFunction", "GenericCost", "TerminalMinControlCost"]


def _state_vector(state: Any) -> np.ndarray:
    if hasattr(state, "to_vector"):
        return np.asarray(state.to_vector(), dtype=float).ravel()
    return np.asarray(state, dtype=float).ravel()


def _matrix(value: Any, name: str) -> np.ndarray:
    array = np.array(value, dtype=float)
    if array.ndim != 2:
        raise ConfigError(f"{name} matrix must be two-dimensional")
    return array


def _is_square(matrix: np.ndarray) -> bool:
    return matrix.shape[0] == matrix.shape[1]


def _input_matrix(inputs: Any) -> np.ndarray:
    array = np.asarray(inputs, dtype=float)
    if array.ndim != 2:
        raise ConfigError("Input trajectory must be a matrix with one column per input")
    return array


def _input_cost(r_matrix: np.ndarray, inputs: np.ndarray) -> float:
    return float(sum(column @ r_matrix @ column for column in inputs.T))


class CostFunction(ABC):
    """A cost over a state trajectory and an input matrix (one column per step)."""

    q: np.ndarray | None = None
    qn: np.ndarray | None = None
    r: np.ndarray | None = None

    @abstractmethod
    def cost(self, states: Sequence[Any], inputs: Any) -> float:
        """Total cost of the trajectory."""

    @abstractmethod
    def stage_cost_gradient(self, state: Any, state_idx: int) -> np.ndarray:
        """Gradient of the running cost with respect to the state at a step."""

    @abstractmethod
    def terminal_cost_gradient(self, state: Any) -> np.ndarray:
        """Gradient of the terminal cost with respect to the final state."""


class GenericCost(CostFunction):
    """Quadratic tracking cost around a reference state trajectory."""

    def __init__(
        self,
        q_matrix: Any,
        qn_matrix: Any,
        r_matrix: Any,
        state_traj: Sequence[Any],
        input_dim: int,
    ) -> None:
        q = _matrix(q_matrix, "Q")
        qn = _matrix(qn_matrix, "Qn")
        r = _matrix(r_matrix, "R")
        if not _is_square(q):
            raise ConfigError("Q matrix must be square")
        if not _is_square(qn):
            raise ConfigError("Qn matrix must be square")
        if not _is_square(r):
            raise ConfigError("R matrix must be square")
        if q.shape[0] != qn.shape[0]:
            raise ConfigError("Q and Qn matrices must have the same dimension")

        reference = [_state_vector(s) for s in state_traj]
        if not reference:
            raise ConfigError("State trajectory cannot be empty")

        if q.shape[0] != reference[0].size:
            raise ConfigError("Q matrix dimension must match state dimension")
        if r.shape[0] != input_dim:
            raise ConfigError("R matrix dimension must match input dimension")

        self.q = q
        self.qn = qn
        self.r = r
        self.reference = reference

    def cost(self, states: Sequence[Any], inputs: Any) -> float:
        inputs = _input_matrix(inputs)
        if inputs.shape[1] + 1 != len(states):
            raise ConfigError(
                "State trajectory needs to have one more element than input trajectory"
            )
        if len(states) != len(self.reference):
            raise ConfigError("Mismatch in state trajectory length")

        input_cost = _input_cost(self.r, inputs)
        state_cost = 0.0
        for state, ref in zip(states[:-1], self.reference):
            diff = _state_vector(state) - ref
            state_cost += float(diff @ self.q @ diff)
        staging_cost = 0.5 * (state_cost + input_cost)

        diff = _state_vector(states[-1]) - self.reference[-1]
        terminal_cost = 0.5 * float(diff @ self.qn @ diff)
        return staging_cost + terminal_cost

    def stage_cost_gradient(self, state: Any, state_idx: int) -> np.ndarray:
        if not 0 <= state_idx < len(self.reference):
            raise ConfigError("Mismatch in state trajectory length")
        return self.q @ (_state_vector(state) - self.reference[state_idx])

    def terminal_cost_gradient(self, state: Any) -> np.ndarray:
        return self.qn @ (_state_vector(state) - self.reference[-1])


class TerminalMinControlCost(CostFunction):
    """Minimum control effort with a quadratic penalty on the final state."""

    def __init__(
        self, qn_matrix: Any, r_matrix: Any, final_state: Any, input_dim: int
    ) -> None:
        qn = _matrix(qn_matrix, "Qn")
        r = _matrix(r_matrix, "R")
        if not _is_square(qn):
            raise ConfigError("Q cost matrix needs to be square")
        if not _is_square(r):
            raise ConfigError("R matrix needs to be square")

        final = _state_vector(final_state)
        if qn.shape[0] != final.size:
            raise ConfigError("Qn matrix dimension must match state dimension")
        if r.shape[0] != input_dim:
            raise ConfigError("R matrix dimension must match input dimension")

        self.qn = qn
        self.r = r
        self.final_state = final

    def cost(self, states: Sequence[Any], inputs: Any) -> float:
        inputs = _input_matrix(inputs)
        if len(states) == 0:
            raise ConfigError("State trajectory cannot be empty")
        staging_cost = _input_cost(self.r, inputs)
        diff = _state_vector(states[-1]) - self.final_state
        terminal_cost = float(diff @ self.qn @ diff)
        return 0.5 * (terminal_cost + staging_cost)

    def stage_cost_gradient(self, state: Any, state_idx: int) -> np.ndarray:
        return np.zeros(_state_vector(state).size)

    def terminal_cost_gradient(self, state: Any) -> np.ndarray:
        return self.qn @ (_state_vector(state) - self.final_state)