import pytest

from carousel.state import ImageListState, compute_skip_size


def make_state(n: int, index: int = 0) -> ImageListState:
    return ImageListState([f"img{i}.png" for i in range(n)], index)


@pytest.mark.parametrize("count,expected", [(0, 1), (1, 1), (9, 1), (10, 2), (19, 2), (100, 11)])
def test_skip_size(count, expected):
    assert compute_skip_size(count) == expected


def test_skip_size_is_monotonic():
    sizes = [compute_skip_size(n) for n in range(500)]
    assert sizes == sorted(sizes)


def test_increment_steps_and_saturates():
    state = make_state(5)
    assert state.increment(1)
    assert state.index == 1
    state.increment(3)
    assert state.index == 4
    state.increment(1)
    assert state.index == 4


def test_increment_clamps_large_step():
    state = make_state(5, 2)
    state.increment(10)
    assert state.index == 4


@pytest.mark.parametrize("n", [0, 1])
def test_increment_is_noop_for_tiny_sets(n):
    state = make_state(n)
    assert state.increment(1) is False
    assert state.index == 0


def test_decrement_steps_and_saturates():
    state = make_state(5, 4)
    state.decrement(3)
    assert state.index == 1
    state.decrement(3)
    assert state.index == 0


@pytest.mark.parametrize("n", range(2, 15))
@pytest.mark.parametrize("step", [1, 2, 3, 7, 20])
def test_navigation_never_leaves_range(n, step):
    state = make_state(n)
    for _ in range(n + 2):
        state.increment(step)
        assert 0 <= state.index < n
    for _ in range(n + 2):
        state.decrement(step)
        assert 0 <= state.index < n


def test_skip_uses_set_size():
    state = make_state(100)
    state.skip_forward()
    assert state.index == 11
    state.skip_backward()
    assert state.index == 0


def test_first_and_last():
    state = make_state(4, 2)
    state.last()
    assert state.index == 3
    state.first()
    assert state.index == 0
    empty = make_state(0)
    empty.last()
    assert empty.index == 0


def test_remove_last_steps_back():
    state = ImageListState(["A", "B", "C"], 2)
    assert state.remove(2) == "C"
    assert state.images == ["A", "B"]
    assert state.index == 1


def test_remove_first_keeps_index():
    state = ImageListState(["A", "B", "C"], 0)
    state.remove(0)
    assert state.images == ["B", "C"]
    assert state.index == 0
    assert state.current_path == "B"


def test_remove_middle_shows_successor():
    state = ImageListState(["A", "B", "C"], 1)
    state.remove(1)
    assert state.current_path == "C"


def test_remove_only_image_resets_index():
    state = ImageListState(["A"], 0)
    state.remove(0)
    assert state.is_empty
    assert state.index == 0
    assert state.current_path is None


@pytest.mark.parametrize("n", range(1, 8))
def test_removing_current_until_empty_keeps_index_valid(n):
    for start in range(n):
        state = make_state(n, start)
        while not state.is_empty:
            state.remove(state.index)
            if state.is_empty:
                assert state.index == 0
            else:
                assert 0 <= state.index < state.count


@pytest.mark.parametrize("bad", [3, 10, -1])
def test_remove_out_of_bounds_is_fatal(bad):
    state = ImageListState(["A", "B", "C"], 0)
    with pytest.raises(IndexError):
        state.remove(bad)
    assert state.images == ["A", "B", "C"]


def test_current_path_detects_broken_index():
    state = ImageListState(["A"], 5)
    with pytest.raises(IndexError):
        state.current_path
