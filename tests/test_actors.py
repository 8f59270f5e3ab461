import numpy as np
import pytest

from jeeprun.actors import (
    CollectibleGameObject,
    CollectibleType,
    EndGoalObject,
    Outcome,
    WeaklingObject,
)


def make_weakling(position=(0.0, 0.0, 0.0), goal=(0.0, 10.0, 0.0)):
    return WeaklingObject(position, None, None, 0, (1.0, 1.0), 0.5, goal)


def make_goal(position=(0.0, 0.0, 0.0)):
    return EndGoalObject(position, None, None, 0, (3.5, 3.5), 3.0)


def test_collectible_kind_and_health():
    item = CollectibleGameObject((1.0, 2.0, 0.0), None, None, 0, (1.0, 1.0), 2, 0.3)
    assert item.kind is CollectibleType.INVINCIBILITY
    assert item.health == -1
    assert item.radius == pytest.approx(0.3)


def test_collectible_update_keeps_position():
    item = CollectibleGameObject((1.0, 2.0, 0.0), None, None, 0, (1.0, 1.0), 0, 0.3)
    item.update(1.0)
    assert np.allclose(item.position, [1.0, 2.0, 0.0])


def test_collectible_unknown_kind_rejected():
    with pytest.raises(ValueError):
        CollectibleGameObject((0.0, 0.0), None, None, 0, (1.0, 1.0), 7, 0.3)


def test_weakling_walks_towards_goal():
    weakling = make_weakling()
    before = np.linalg.norm(weakling.goal - weakling.position)
    weakling.update(2.0)
    after = np.linalg.norm(weakling.goal - weakling.position)
    assert before - after == pytest.approx(2.0 * weakling.speed)
    assert weakling.position[0] == pytest.approx(0.0)


def test_weakling_stops_after_reaching_end():
    weakling = make_weakling()
    weakling.reach_end()
    weakling.update(1.0)
    assert np.allclose(weakling.position, [0.0, 0.0, 0.0])


def test_weakling_dies_after_three_hits_and_stops():
    weakling = make_weakling()
    for _ in range(3):
        weakling.hurt()
    assert weakling.dying
    weakling.update(1.0)
    assert np.allclose(weakling.position, [0.0, 0.0, 0.0])


def test_weakling_set_goal_changes_direction():
    weakling = make_weakling()
    weakling.set_goal((-5.0, 0.0, 0.0))
    weakling.update(1.0)
    assert weakling.position[0] < 0.0
    assert weakling.position[1] == pytest.approx(0.0)


def test_end_goal_outcomes():
    goal = make_goal()
    assert goal.check_end_goal() is Outcome.IN_PROGRESS
    goal.add_weakling(make_weakling())
    goal.add_weakling(make_weakling())
    goal.set_num_alive(2)
    assert goal.check_end_goal() is Outcome.WIN
    goal.update_num_alive()
    assert goal.check_end_goal() is Outcome.IN_PROGRESS
    goal.update_num_alive()
    assert goal.check_end_goal() is Outcome.LOSE
    goal.add_alive()
    assert goal.num_alive == 1


def test_end_goal_collision_with_weakling():
    goal = make_goal()
    assert goal.collide(make_weakling(position=(0.0, 0.0, 0.0)))
    assert not goal.collide(make_weakling(position=(0.0, 40.0, 0.0)))