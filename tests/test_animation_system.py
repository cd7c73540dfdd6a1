import pytest

from tilemerge.components.animation_queue import AnimationQueue
from tilemerge.components.direction import Direction
from tilemerge.events.bus import EVENT_GAME_RESTARTED, EVENT_MOVE_APPLIED, EventBus
from tilemerge.systems.animation import AnimationSystem
from tilemerge.utils.game_state import get_singleton
from tilemerge.world import create_world
from tests.helpers import FakeClock, board_from_levels

_ = None


def _setup(grid=None):
    bus = EventBus()
    clock = FakeClock()
    state = board_from_levels(grid or [[1, _, _, _], [_, _, _, 2]])
    world = create_world(state=state)
    system = AnimationSystem(world, bus, clock=clock)
    return bus, clock, world, state, system


def test_initial_board_is_first_snapshot():
    _, _, _, state, system = _setup()
    assert system.queue.depth == 1
    assert system.queue.head is not state
    assert system.queue.head.equals(state)
    assert system.queue.progress == 0.0


def test_progress_steps_with_elapsed_time_and_clamps():
    _, clock, _, _, system = _setup()
    assert system.advance() == 0.0
    clock.advance(0.1)
    assert system.advance() == pytest.approx(0.5)
    clock.advance(0.2)
    assert system.advance() == 1.0
    clock.advance(5.0)
    assert system.advance() == 1.0
    assert system.queue.settled


def test_new_snapshot_retires_head_after_completion():
    _, clock, _, state, system = _setup()
    system.advance()
    clock.advance(1.0)
    system.advance()
    assert system.queue.progress == 1.0

    state.move(Direction.LEFT)
    system.add_state(state)
    assert system.queue.depth == 2

    seen = []
    for _ in range(50):
        clock.advance(0.01)
        progress = system.advance()
        assert 0.0 <= progress <= 1.0
        seen.append(progress)
    assert system.queue.depth == 1
    assert system.queue.head.equals(state)
    assert seen[-1] == 1.0


def test_queue_depth_speeds_up_playback():
    _, clock, _, state, system = _setup()
    system.advance()
    system.add_state(state)
    system.add_state(state)
    clock.advance(0.02)
    # Three snapshots queued: 3 * 0.02 / 0.2
    assert system.advance() == pytest.approx(0.3)


def test_clock_going_backwards_never_produces_negative_progress():
    _, clock, _, _, system = _setup()
    system.advance()
    clock.advance(-1.0)
    assert system.advance() == 0.0


def test_snapshots_are_deep_copies():
    state, system = _setup([[1, 1, _, _]])[3:]
    system.add_state(state)
    state.gravitate(Direction.LEFT)
    snapshot = system.queue.snapshots[-1]
    assert snapshot.tiles[1].level == 1
    assert snapshot.tiles[0].prev_index == [0]


def test_move_and_restart_events_feed_queue():
    bus, clock, world, state, system = _setup()
    system.advance()
    clock.advance(0.05)
    system.advance()
    bus.emit(EVENT_MOVE_APPLIED, direction=Direction.LEFT, state=state, score_delta=0, merges=0)
    assert system.queue.depth == 2

    bus.emit(EVENT_GAME_RESTARTED, state=state)
    queue = get_singleton(world, AnimationQueue)
    assert queue.depth == 1
    assert queue.progress == 0.0


def test_draw_hands_head_and_progress_to_renderer():
    _, clock, _, _, system = _setup()
    calls = []
    system.draw(lambda snapshot, progress: calls.append((snapshot, progress)))
    clock.advance(0.1)
    frame = system.draw(lambda snapshot, progress: calls.append((snapshot, progress)))
    assert len(calls) == 2
    assert calls[1] == frame
    assert frame[1] == pytest.approx(0.5)


def test_rejects_non_positive_duration():
    bus = EventBus()
    world = create_world(state=board_from_levels([[1, _]]))
    with pytest.raises(ValueError):
        AnimationSystem(world, bus, base_duration=0)
