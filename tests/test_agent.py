import numpy as np
import pytest

from steering import Agent, integrate


def test_defaults_and_layer_padding():
    agent = Agent(position=(200.0, 0.0), velocity=(10.0, -10.0))
    assert agent.position.shape == (3,)
    assert np.array_equal(agent.position, [200.0, 0.0, 0.0])
    assert np.array_equal(agent.acceleration, [0.0, 0.0])
    assert agent.velocity.dtype == np.float64


def test_layer_is_kept():
    agent = Agent(position=(1.0, 2.0, 100.0))
    assert agent.position[2] == 100.0
    assert np.array_equal(agent.location, [1.0, 2.0])


@pytest.mark.parametrize("kwargs", [{"max_speed": -1.0}, {"max_force": -0.5}])
def test_negative_limits_rejected(kwargs):
    with pytest.raises(ValueError):
        Agent(**kwargs)


def test_forces_sum_without_clamping():
    agent = Agent(max_force=0.1)
    agent.apply_force(np.array([0.1, 0.0]))
    agent.apply_force(np.array([0.1, 0.0]))
    agent.apply_force(np.array([0.0, 0.3]))
    assert np.allclose(agent.acceleration, [0.2, 0.3])


def test_reset_acceleration():
    agent = Agent()
    agent.apply_force(np.array([5.0, -5.0]))
    agent.reset_acceleration()
    assert np.array_equal(agent.acceleration, np.zeros(2))


def test_seek_caches_target_and_does_not_touch_acceleration():
    agent = Agent(position=(10.0, 0.0))
    force = agent.seek(np.array([0.0, 0.0, 5.0]))
    assert np.array_equal(agent.target, [0.0, 0.0])
    assert np.allclose(force, [-0.1, 0.0])
    assert np.array_equal(agent.acceleration, np.zeros(2))


def test_distance_and_speed():
    agent = Agent(position=(3.0, 4.0, 50.0), velocity=(0.0, -2.0))
    assert agent.distance_to((0.0, 0.0)) == pytest.approx(5.0)
    assert agent.speed == pytest.approx(2.0)


def test_velocity_drops_extra_components():
    agent = Agent(position=(0.0, 0.0), velocity=(1.0, 2.0, 0.0), acceleration=(0.5, 0.0, 9.0))
    assert agent.velocity.shape == (2,)
    assert agent.acceleration.shape == (2,)
    integrate(agent)
    assert np.allclose(agent.location, [1.5, 2.0])


def test_velocity_needs_two_components():
    with pytest.raises(ValueError):
        Agent(velocity=(1.0,))
