"""Shared building blocks: errors, evaluable matrices and labelled states."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Sequence

import numpy as np

__all__ = [
    "ModelError",
    "ConfigError",
    "Evaluable",
    "ConstantMatrix",
    "FunctionMatrix",
    "Labelizable",
]


class ModelError(Exception):
    """Base error for models, costs and controllers."""


class ConfigError(ModelError, ValueError):
    """Raised when a model, cost or controller is configured inconsistently."""


def _to_matrix(value: Any) -> np.ndarray:
    """Convert a scalar, vector or matrix result into a 2-D float matrix."""
    try:
        array = np.asarray(value, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ModelError(f"cannot convert evaluation result to a matrix: {exc}") from exc
    if array.ndim == 0:
        return array.reshape(1, 1)
    if array.ndim == 1:
        return array.reshape(-1, 1)
    if array.ndim == 2:
        return array
    raise ModelError(f"evaluation result has {array.ndim} dimensions, expected at most 2")


class Evaluable(ABC):
    """Something that yields a matrix when given a flat list of values."""

    @abstractmethod
    def evaluate(self, vals: Sequence[float]) -> np.ndarray:
        """Return the matrix for the given values."""


class ConstantMatrix(Evaluable):
    """A matrix that does not depend on the values it is evaluated at."""

    def __init__(self, matrix: Any) -> None:
        array = np.array(matrix, dtype=float)
        if array.ndim != 2:
            raise ConfigError("A constant matrix must be two-dimensional")
        self.matrix = array

    def evaluate(self, vals: Sequence[float]) -> np.ndarray:
        return self.matrix.copy()


class FunctionMatrix(Evaluable):
    """A matrix computed by a function of the values it is evaluated at."""

    def __init__(self, function: Callable[[list[float]], Any]) -> None:
        self.function = function

    def evaluate(self, vals: Sequence[float]) -> np.ndarray:
        try:
            result = self.function(list(vals))
        except ModelError:
            raise
        except Exception as exc:
            raise ModelError(f"evaluation failed: {exc}") from exc
        return _to_matrix(result)


class Labelizable:
    """Mixin for dataclasses whose float fields are addressed by name."""

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(field.name for field in dataclasses.fields(cls))

    @classmethod
    def index_of(cls, label: str) -> int:
        try:
            return cls.labels().index(label)
        except ValueError:
            raise ConfigError(f"Unknown label {label!r} for {cls.__name__}") from None

    @classmethod
    def from_vector(cls, values: Iterable[float]):
        values = [float(v) for v in values]
        labels = cls.labels()
        if len(values) != len(labels):
            raise ConfigError(
                f"{cls.__name__} expects {len(labels)} values, got {len(values)}"
            )
        return cls(*values)

    def to_vector(self) -> np.ndarray:
        return np.array([getattr(self, name) for name in self.labels()], dtype=float)

    def vectorize(self, labels: Iterable[str]) -> list[float]:
        return [float(getattr(self, self.labels()[self.index_of(label)])) for label in labels]

    def extract(self, labels: Iterable[str]) -> tuple[float, ...]:
        return tuple(self.vectorize(labels))