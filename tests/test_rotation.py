import random
import threading
from collections import Counter

import pytest

from fragments.rotation import RotationRegistry, RotationTracker
from fragments.vocabularies import ALL_VOCABULARIES, SMOKE_COLORS, Vocabulary


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def test_no_repeat_until_exhausted():
    tracker = RotationTracker(8, rng=random.Random(0))
    first_cycle = [tracker.draw_index() for _ in range(8)]
    assert sorted(first_cycle) == list(range(8))

    # Next draw starts a new cycle
    ninth = tracker.draw_index()
    assert ninth in range(8)
    assert tracker.used == {ninth}


def test_every_cycle_is_a_permutation():
    tracker = RotationTracker(5, rng=random.Random(42))
    for _ in range(20):
        cycle = [tracker.draw_index() for _ in range(5)]
        assert sorted(cycle) == list(range(5))


def test_first_draw_is_roughly_uniform():
    counts = Counter()
    rng = random.Random(7)
    for _ in range(6000):
        counts[RotationTracker(6, rng=rng).draw_index()] += 1
    for index in range(6):
        # expected 1000 each
        assert 850 < counts[index] < 1150


def test_long_run_is_uniform_with_partial_cycle_resets():
    size = 6
    clock = FakeClock()
    tracker = RotationTracker(size, reset_window=300.0, rng=random.Random(11), clock=clock)
    cycle_lengths = random.Random(12)
    counts = Counter()
    total = 0

    for _ in range(4000):
        # Draw part of a cycle, then let the window expire mid-cycle
        for _ in range(cycle_lengths.randint(1, size - 1)):
            counts[tracker.draw_index()] += 1
            total += 1
        clock.now += 301.0

    for index in range(size):
        assert counts[index] / total == pytest.approx(1 / size, abs=0.02)


def test_time_window_resets_used_set():
    clock = FakeClock()
    tracker = RotationTracker(4, reset_window=300.0, rng=random.Random(1), clock=clock)
    tracker.draw_index()
    tracker.draw_index()
    assert len(tracker.used) == 2

    clock.now += 301.0
    tracker.draw_index()
    assert len(tracker.used) == 1
    assert tracker.last_reset == clock.now


def test_window_not_yet_elapsed_keeps_state():
    clock = FakeClock()
    tracker = RotationTracker(4, reset_window=300.0, rng=random.Random(1), clock=clock)
    tracker.draw_index()
    clock.now += 299.0
    tracker.draw_index()
    assert len(tracker.used) == 2


def test_disabled_window_only_resets_on_exhaustion():
    clock = FakeClock()
    tracker = RotationTracker(3, reset_window=None, rng=random.Random(1), clock=clock)
    tracker.draw_index()
    clock.now += 10_000.0
    tracker.draw_index()
    assert len(tracker.used) == 2


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        RotationTracker(0)


def test_concurrent_draws_do_not_repeat_within_a_cycle():
    size = 64
    tracker = RotationTracker(size, reset_window=None, rng=random.Random(3))
    results = []
    lock = threading.Lock()

    def worker():
        for _ in range(8):
            index = tracker.draw_index()
            with lock:
                results.append(index)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == list(range(size))


def test_registry_keeps_one_tracker_per_vocabulary():
    registry = RotationRegistry(rng=random.Random(5))
    drawn = {registry.draw(SMOKE_COLORS) for _ in range(len(SMOKE_COLORS))}
    assert drawn == set(SMOKE_COLORS.fragments)
    assert registry.tracker(SMOKE_COLORS) is registry.tracker(SMOKE_COLORS)


def test_registry_trackers_are_independent():
    registry = RotationRegistry(rng=random.Random(5))
    a = Vocabulary("a", ("1", "2"))
    b = Vocabulary("b", ("x", "y"))
    registry.draw(a)
    assert registry.tracker(b).used == set()


def test_reset_all_clears_trackers():
    registry = RotationRegistry(rng=random.Random(5))
    registry.draw(SMOKE_COLORS)
    registry.reset_all()
    assert registry.tracker(SMOKE_COLORS).used == set()


def test_vocabulary_sizes():
    sizes = {v.name: len(v) for v in ALL_VOCABULARIES}
    assert sizes["smoke_color"] == 8
    assert sizes["crystal_color"] == 6
    assert sizes["butterfly_color"] == 7
    assert sizes["reflection_pact_animal"] == 19
    assert sizes["molten_gloss_animal"] == 3
    assert sizes["airport_fashion_look"] == 10
    assert sizes["airport_scene"] == 10
    assert sizes["airport_time_of_day"] == 8
    assert sizes["paper_pop_theme"] == 8
    assert sizes["colorcore_theme"] == 6
    assert sizes["colorcore_pose"] == 12
    for name in ("venom_fashion_look", "venom_symbol", "venom_environment", "venom_lighting", "venom_pose"):
        assert sizes[name] == 10


def test_empty_vocabulary_is_rejected():
    with pytest.raises(ValueError):
        Vocabulary("nothing", ())
