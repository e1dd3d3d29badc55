import numpy as np
import pytest

from config import seek as config
from steering import (
    Agent, OrbitTarget, PointerTarget, SeekerBatch, Simulation, StaticTarget,
    WaypointTarget, build_simulation, integrate
)


def example_agent():
    return Agent(position=(200.0, 0.0, 100.0), velocity=(10.0, -10.0), max_speed=2.0, max_force=0.1)


def test_example_scenario_settles_near_target():
    sim = Simulation([example_agent()], StaticTarget((0.0, 0.0)))
    agent = sim.agents[0]

    sim.run(9000)
    distances = []
    for _ in range(1000):
        sim.step()
        distances.append(agent.distance_to((0.0, 0.0)))
        assert agent.speed <= 2.0 + 1e-9

    assert sim.tick == 10000
    assert max(distances) < 30.0
    assert np.all(np.isfinite(agent.position))


def test_approach_from_rest_is_monotonic_and_stays_bounded():
    agent = Agent(position=(500.0, 0.0), velocity=(0.0, 0.0), max_speed=2.0, max_force=0.1)
    sim = Simulation([agent], StaticTarget((0.0, 0.0)))

    previous = agent.distance_to((0.0, 0.0))
    while previous > agent.max_speed:
        sim.step()
        distance = agent.distance_to((0.0, 0.0))
        assert distance < previous
        previous = distance

    arrival_tick = sim.tick
    assert arrival_tick < 400
    for _ in range(5000):
        sim.step()
        assert agent.distance_to((0.0, 0.0)) < 30.0


def test_speed_cap_with_moving_targets():
    rng = np.random.default_rng(3)
    agents = [
        Agent(position=tuple(rng.uniform(-300, 300, 2)), velocity=tuple(rng.uniform(-20, 20, 2)),
              max_speed=2.0, max_force=0.1)
        for _ in range(5)
    ]
    pointer = PointerTarget()
    sim = Simulation(agents, pointer)
    for _ in range(2000):
        pointer.set(tuple(rng.uniform(-400, 400, 2)))
        sim.step()
        assert np.all(sim.speeds() <= 2.0 + 1e-9)


def test_acceleration_zero_after_every_frame():
    sim = Simulation([example_agent(), example_agent()], OrbitTarget(radius=100.0))
    for _ in range(50):
        sim.step()
        for agent in sim.agents:
            assert np.array_equal(agent.acceleration, np.zeros(2))


def test_degenerate_target_keeps_velocity():
    agent = Agent(position=(5.0, 5.0), velocity=(1.0, 0.0), max_speed=2.0, max_force=0.1)
    sim = Simulation([agent], StaticTarget((5.0, 5.0)))
    sim.step()
    assert np.array_equal(agent.velocity, [1.0, 0.0])
    assert np.array_equal(agent.location, [6.0, 5.0])


def test_step_matches_manual_pipeline():
    target = np.array([-50.0, 30.0])
    sim = Simulation([example_agent()], StaticTarget(target))
    manual = example_agent()

    for _ in range(200):
        sim.step()
        manual.apply_force(manual.seek(target))
        integrate(manual)

    assert np.array_equal(sim.agents[0].position, manual.position)
    assert np.array_equal(sim.agents[0].velocity, manual.velocity)


def test_agents_do_not_influence_each_other():
    target = WaypointTarget([(0.0, 0.0), (100.0, 100.0)], hold_ticks=25)
    solo = Simulation([example_agent()], WaypointTarget([(0.0, 0.0), (100.0, 100.0)], hold_ticks=25))
    crowd = Simulation(
        [example_agent(), Agent(position=(-300.0, 50.0), velocity=(0.0, 3.0))], target
    )
    solo.run(300)
    crowd.run(300)
    assert np.array_equal(solo.agents[0].position, crowd.agents[0].position)


def test_clamp_flag_changes_trajectory():
    default = Simulation([example_agent()], StaticTarget((0.0, 0.0)))
    clamped = Simulation([example_agent()], StaticTarget((0.0, 0.0)), clamp_before_move=True)
    default.step()
    clamped.step()
    # First tick: the initial 14 unit/tick velocity is only capped in the clamped variant
    assert default.agents[0].distance_to((200.0, 0.0)) > 10.0
    assert clamped.agents[0].distance_to((200.0, 0.0)) == pytest.approx(2.0)


def test_reset_restores_initial_state():
    sim = Simulation([example_agent()], StaticTarget((0.0, 0.0)))
    sim.run(100)
    sim.reset()
    agent = sim.agents[0]
    assert sim.tick == 0
    assert np.array_equal(agent.position, [200.0, 0.0, 100.0])
    assert np.array_equal(agent.velocity, [10.0, -10.0])
    assert agent.orientation == 0.0


def test_render_state_exposes_position_and_orientation():
    sim = Simulation([example_agent()], StaticTarget((1.0, 2.0)))
    sim.step()
    state = sim.render_state()
    assert state.positions.shape == (1, 2)
    assert state.orientations.shape == (1,)
    assert np.array_equal(state.target, [1.0, 2.0])
    assert state.layer == 100.0
    assert state.orientations[0] == sim.agents[0].orientation


def test_build_simulation_from_config():
    sim = build_simulation(config.AGENT, config.SIMULATION, StaticTarget())
    assert isinstance(sim, Simulation)
    assert sim.num_agents == 1
    agent = sim.agents[0]
    assert np.array_equal(agent.position, [200.0, 0.0, config.AGENT["layer"]])
    assert np.array_equal(agent.velocity, [10.0, -10.0])
    assert agent.max_speed == 2.0
    assert agent.max_force == 0.1


def test_build_simulation_switches_to_batch():
    count = config.SIMULATION["batch_threshold"] + 1
    sim = build_simulation(config.AGENT, config.SIMULATION, StaticTarget(), count=count,
                           clamp_before_move=True)
    assert isinstance(sim, SeekerBatch)
    assert sim.num_agents == count
    assert sim.clamp_before_move is True


def test_build_simulation_rejects_empty():
    with pytest.raises(ValueError):
        build_simulation(config.AGENT, config.SIMULATION, StaticTarget(), count=0)
