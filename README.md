# optctl

Building blocks for discrete-time optimal control, written with NumPy:
quadratic cost functions over state and input trajectories, matrices that
can be evaluated at a point (such as Jacobians), labelled state and input
types, and input trajectories that convert to and from a matrix.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `optctl.common`

- `ModelError`: base exception. `ConfigError` is a subclass of both
  `ModelError` and `ValueError` and is raised for inconsistent
  configuration throughout the package.
- `Evaluable`: abstract interface with `evaluate(vals)`, returning a 2-D
  matrix for a flat list of values.
  - `ConstantMatrix(matrix)` always returns a copy of the same matrix; the
    matrix must be two-dimensional.
  - `FunctionMatrix(function)` calls `function(list(vals))` and shapes the
    result into a 2-D matrix (a scalar becomes 1x1, a vector becomes a
    column). Errors raised by the function are re-raised as `ModelError`.
- `Labelizable`: a mixin for dataclasses whose fields are floats. It adds
  `labels()`, `index_of(label)`, `from_vector(values)`, `to_vector()`,
  `vectorize(labels)` and `extract(labels)`. An unknown label or a vector
  of the wrong length raises `ConfigError`.

```python
from dataclasses import dataclass
from optctl.common import Labelizable

@dataclass
class BallState(Labelizable):
    pos_x: float
    pos_y: float
    v_x: float
    v_y: float

s = BallState(0.0, 1.0, 1.0, 4.5)
BallState.labels()            # ('pos_x', 'pos_y', 'v_x', 'v_y')
s.extract(["pos_y"])          # (1.0,)
BallState.from_vector(s.to_vector()) == s   # True
```

### `optctl.cost`

`CostFunction` is the abstract interface: `cost(states, inputs)`,
`stage_cost_gradient(state, state_idx)` and `terminal_cost_gradient(state)`,
plus the weight matrices `q`, `qn` and `r` (each `None` when the cost has
no such term). States may be `Labelizable` objects or plain sequences;
`inputs` is a matrix with one column per time step.

- `GenericCost(q_matrix, qn_matrix, r_matrix, state_traj, input_dim)`
  tracks a reference state trajectory:
  `0.5 * sum(dx' Q dx + u' R u) + 0.5 * dx_N' Qn dx_N`.
  All matrices must be square, `Q` and `Qn` must match the state size and
  `R` must match `input_dim`; the reference may not be empty. `cost`
  requires one more state than input columns and as many states as the
  reference has.
- `TerminalMinControlCost(qn_matrix, r_matrix, final_state, input_dim)`
  penalises input effort and the final state's distance from a target:
  `0.5 * (sum(u' R u) + dx_N' Qn dx_N)`. Its stage gradient is zero.

```python
import numpy as np
from optctl.cost import TerminalMinControlCost

cost = TerminalMinControlCost(np.eye(4), np.eye(2), s, input_dim=2)
inputs = np.array([[1.0, 0.0], [0.0, 1.0]])   # one column per step
cost.cost([s], inputs)                         # 1.0
```

### `optctl.trajectory`

`InputTrajectory` holds a list of inputs and supports `len()` and
iteration. `InputTrajectory.from_matrix(matrix, factory)` builds one input
per column by calling `factory` with that column's values; an empty or
non-2-D matrix raises `ConfigError`. `to_matrix()` stacks the inputs as
columns, returns a 0x0 matrix when empty, and raises `ConfigError` if the
inputs differ in size.

## What this package does not do

It supplies costs, evaluable Jacobians and trajectory containers, but no
optimiser or controller that uses them, no dynamics models or simulators,
and no plotting or animation. Solving a control problem is left to code
built on top of these pieces.