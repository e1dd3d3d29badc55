import numpy as np
import pytest

from steering import Agent, OrbitTarget, SeekerBatch, Simulation, StaticTarget


def far_starts(n, seed=0):
    rng = np.random.default_rng(seed)
    angles = rng.uniform(0, 2 * np.pi, n)
    radii = rng.uniform(400, 600, n)
    positions = np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])
    velocities = rng.uniform(-10, 10, (n, 2))
    return positions, velocities


@pytest.mark.parametrize("clamp_before_move", [False, True])
def test_batch_matches_per_agent_simulation(clamp_before_move):
    positions, velocities = far_starts(16)
    agents = [Agent(position=p, velocity=v, max_speed=2.0, max_force=0.1)
              for p, v in zip(positions, velocities)]
    sim = Simulation(agents, OrbitTarget(radius=30.0, angular_speed=0.05), clamp_before_move)
    batch = SeekerBatch(positions, velocities, OrbitTarget(radius=30.0, angular_speed=0.05),
                        max_speed=2.0, max_force=0.1, clamp_before_move=clamp_before_move)

    for _ in range(150):
        sim.step()
        batch.step()

    state = sim.render_state()
    assert np.allclose(batch.positions, state.positions, atol=1e-6)
    assert np.allclose(batch.velocities, [a.velocity for a in sim.agents], atol=1e-6)
    assert np.allclose(batch.orientations, state.orientations, atol=1e-6)


def test_batch_speed_cap():
    positions, velocities = far_starts(200, seed=1)
    velocities *= 10
    batch = SeekerBatch(positions, velocities, StaticTarget(), max_speed=2.0, max_force=0.1)
    for _ in range(300):
        batch.step()
        assert np.all(batch.speeds() <= 2.0 + 1e-9)


def test_batch_degenerate_target_keeps_velocity():
    batch = SeekerBatch(np.array([[5.0, 5.0]]), np.array([[1.0, 0.0]]), StaticTarget((5.0, 5.0)))
    batch.step()
    assert np.array_equal(batch.velocities, [[1.0, 0.0]])
    assert np.array_equal(batch.positions, [[6.0, 5.0]])
    assert np.all(np.isfinite(batch.orientations))


def test_batch_per_seeker_targets():
    positions = np.array([[0.0, 0.0], [0.0, 0.0]])
    batch = SeekerBatch(positions, np.zeros((2, 2)), StaticTarget(), max_speed=2.0, max_force=0.1)
    batch.step_toward(np.array([[10.0, 0.0], [-10.0, 0.0]]))
    assert np.allclose(batch.velocities, [[0.1, 0.0], [-0.1, 0.0]])


def test_batch_reset_and_render_state():
    positions, velocities = far_starts(3)
    batch = SeekerBatch(positions, velocities, StaticTarget((1.0, 1.0)), layer=100.0)
    batch.run(20)
    state = batch.render_state()
    assert state.positions.shape == (3, 2)
    assert state.layer == 100.0
    assert np.array_equal(state.target, [1.0, 1.0])

    batch.reset()
    assert batch.tick == 0
    assert np.array_equal(batch.positions, positions)
    assert np.array_equal(batch.velocities, velocities)


def test_batch_validation():
    with pytest.raises(ValueError):
        SeekerBatch(np.zeros((2, 2)), np.zeros((3, 2)), StaticTarget())
    with pytest.raises(ValueError):
        SeekerBatch(np.zeros((1, 2)), np.zeros((1, 2)), StaticTarget(), max_speed=-1.0)
