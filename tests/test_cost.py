from dataclasses import dataclass

import numpy as np
import pytest

from optctl.common import ConfigError, Labelizable
from optctl.cost import GenericCost, TerminalMinControlCost


@dataclass
class MockState(Labelizable):
    f1: float
    f2: float


@dataclass
class MockInput(Labelizable):
    u1: float


@dataclass
class MockState4(Labelizable):
    f1: float
    f2: float
    f3: float
    f4: float


@dataclass
class MockInput2(Labelizable):
    u1: float
    u2: float


def _columns(inputs):
    return np.column_stack([i.to_vector() for i in inputs])


def _generic(state_traj):
    return GenericCost(np.eye(2), np.eye(2), np.eye(1), state_traj, input_dim=1)


# GenericCost


def test_new_valid_inputs():
    state_traj = [MockState(1.0, 3.0), MockState(2.3, 4.3), MockState(4.3, 3.2)]
    cost = _generic(state_traj)
    np.testing.assert_array_equal(cost.q, np.eye(2))
    np.testing.assert_array_equal(cost.qn, np.eye(2))
    np.testing.assert_array_equal(cost.r, np.eye(1))
    assert len(cost.reference) == 3


def test_new_invalid_q_matrix():
    state_traj = [MockState(1.0, 2.0), MockState(3.0, 4.0)]
    with pytest.raises(ConfigError):
        GenericCost(np.zeros((4, 3)), np.eye(4), np.eye(2), state_traj, input_dim=1)


def test_new_q_qn_dimension_mismatch():
    with pytest.raises(ConfigError):
        GenericCost(np.eye(2), np.eye(3), np.eye(1), [MockState(1.0, 2.0)], input_dim=1)


def test_new_empty_trajectory():
    with pytest.raises(ConfigError):
        GenericCost(np.eye(2), np.eye(2), np.eye(1), [], input_dim=1)


def test_new_state_dimension_mismatch():
    with pytest.raises(ConfigError):
        GenericCost(np.eye(3), np.eye(3), np.eye(1), [MockState(1.0, 2.0)], input_dim=1)


def test_new_input_dimension_mismatch():
    with pytest.raises(ConfigError):
        GenericCost(np.eye(2), np.eye(2), np.eye(2), [MockState(1.0, 2.0)], input_dim=1)


def test_cost_valid():
    state_traj = [MockState(1.0, 2.0), MockState(1.5, 2.5)]
    cost = _generic(state_traj)
    states = [MockState(1.0, 2.0), MockState(1.5, 2.5)]
    inputs = _columns([MockInput(0.1)])
    assert cost.cost(states, inputs) == pytest.approx(0.5 * 0.1 * 0.1)


def test_cost_on_reference_without_input_is_zero():
    state_traj = [MockState(1.0, 2.0), MockState(1.5, 2.5)]
    cost = _generic(state_traj)
    inputs = _columns([MockInput(0.0)])
    assert cost.cost(state_traj, inputs) == 0.0


def test_cost_invalid_length():
    state_traj = [MockState(1.0, 2.0), MockState(1.5, 2.5)]
    cost = _generic(state_traj)
    states = [MockState(1.0, 2.0), MockState(3.0, 4.0)]
    inputs = _columns([MockInput(0.1), MockInput(0.3)])
    with pytest.raises(ConfigError):
        cost.cost(states, inputs)


def test_cost_reference_length_mismatch():
    cost = _generic([MockState(1.0, 2.0), MockState(1.5, 2.5)])
    states = [MockState(1.0, 2.0), MockState(1.5, 2.5), MockState(0.0, 0.0)]
    inputs = _columns([MockInput(0.1), MockInput(0.3)])
    with pytest.raises(ConfigError):
        cost.cost(states, inputs)


def test_stage_cost_gradient_is_q_times_difference():
    cost = _generic([MockState(1.0, 2.0), MockState(1.5, 2.5)])
    grad = cost.stage_cost_gradient(MockState(1.0, 2.0), 0)
    np.testing.assert_array_equal(grad, [0.0, 0.0])
    grad = cost.stage_cost_gradient(MockState(2.5, 2.5), 1)
    np.testing.assert_allclose(grad, [1.0, 0.0])


def test_stage_cost_gradient_index_out_of_range():
    cost = _generic([MockState(1.0, 2.0), MockState(1.5, 2.5)])
    with pytest.raises(ConfigError):
        cost.stage_cost_gradient(MockState(1.0, 2.0), 2)


def test_terminal_cost_gradient_uses_last_reference():
    cost = _generic([MockState(1.0, 2.0), MockState(1.5, 2.5)])
    grad = cost.terminal_cost_gradient(MockState(1.5, 2.5))
    np.testing.assert_array_equal(grad, [0.0, 0.0])


# TerminalMinControlCost


def test_terminal_new_valid_matrices():
    final_state = MockState4(1.0, 2.0, 3.0, 4.0)
    cost = TerminalMinControlCost(np.eye(4), np.eye(2), final_state, input_dim=2)
    assert cost.q is None
    np.testing.assert_array_equal(cost.final_state, [1.0, 2.0, 3.0, 4.0])


def test_terminal_new_invalid_qn_matrix():
    final_state = MockState4(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(ConfigError):
        TerminalMinControlCost(np.eye(3, 4), np.eye(2), final_state, input_dim=2)


def test_terminal_new_invalid_r_matrix():
    final_state = MockState4(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(ConfigError):
        TerminalMinControlCost(np.eye(4), np.eye(3, 2), final_state, input_dim=2)


def test_terminal_cost():
    final_state = MockState4(1.0, 2.0, 3.0, 4.0)
    cost = TerminalMinControlCost(np.eye(4), np.eye(2), final_state, input_dim=2)
    inputs = _columns([MockInput2(1.0, 0.0), MockInput2(0.0, 1.0)])
    assert cost.cost([final_state], inputs) == 1.0


def test_terminal_stage_gradient_is_zero():
    final_state = MockState4(1.0, 2.0, 3.0, 4.0)
    cost = TerminalMinControlCost(np.eye(4), np.eye(2), final_state, input_dim=2)
    grad = cost.stage_cost_gradient(MockState4(5.0, 6.0, 7.0, 8.0), 3)
    np.testing.assert_array_equal(grad, np.zeros(4))


def test_terminal_cost_gradient_vanishes_at_target():
    final_state = MockState4(1.0, 2.0, 3.0, 4.0)
    cost = TerminalMinControlCost(np.eye(4), np.eye(2), final_state, input_dim=2)
    np.testing.assert_array_equal(cost.terminal_cost_gradient(final_state), np.zeros(4))


def test_terminal_cost_empty_states():
    final_state = MockState4(1.0, 2.0, 3.0, 4.0)
    cost = TerminalMinControlCost(np.eye(4), np.eye(2), final_state, input_dim=2)
    with pytest.raises(ConfigError):
        cost.cost([], np.zeros((2, 0)))