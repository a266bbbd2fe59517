import pytest

from navicore.spinner import Spinner, line_alpha, line_count_distance


def test_distance_zero_for_primary():
    assert line_count_distance(4, 4, 12) == 0


def test_distance_wraps_around():
    assert line_count_distance(3, 1, 5) == 3


@pytest.mark.parametrize("total", [5, 12, 20])
def test_distance_always_in_range(total):
    for current in range(total):
        for primary in range(total):
            assert 0 <= line_count_distance(current, primary, total) < total


def test_alpha_of_primary_is_full_alpha():
    assert line_alpha(0, 12, 70.0, 15.0, 0.75) == 0.75


def test_alpha_beyond_threshold_is_minimum():
    assert line_alpha(19, 20, 50.0, 10.0) == pytest.approx(0.1)


def test_alpha_decreases_with_distance():
    alphas = [line_alpha(d, 20, 80.0, 3.0) for d in range(20)]
    assert all(a >= b for a, b in zip(alphas, alphas[1:]))
    assert all(0.0 <= a <= 1.0 for a in alphas)


def test_roundness_clamped():
    spinner = Spinner()
    spinner.roundness = 150
    assert spinner.roundness == 100.0
    spinner.roundness = -5
    assert spinner.roundness == 0.0


def test_rotate_wraps_after_full_turn():
    spinner = Spinner()
    spinner.number_of_lines = 12
    for _ in range(12):
        spinner.rotate()
    assert spinner.counter == 0


def test_setting_lines_resets_counter():
    spinner = Spinner()
    spinner.rotate()
    spinner.rotate()
    spinner.number_of_lines = 8
    assert spinner.counter == 0


def test_line_alphas_brightest_at_counter():
    spinner = Spinner()
    spinner.number_of_lines = 12
    spinner.rotate()
    spinner.rotate()
    alphas = spinner.line_alphas()
    assert len(alphas) == 12
    assert alphas[2] == 1.0
    assert max(alphas) == alphas[2]


def test_size_grows_with_line_length():
    spinner = Spinner()
    before = spinner.size
    spinner.line_length += 5
    assert spinner.size == before + 10


def test_interval_shrinks_with_speed():
    spinner = Spinner()
    slow = spinner.interval
    spinner.revolutions_per_second = 4
    assert 0 < spinner.interval < slow


def test_start_and_stop():
    spinner = Spinner()
    spinner.start()
    assert spinner.is_spinning
    assert not spinner.parent_enabled
    spinner.rotate()
    spinner.stop()
    assert not spinner.is_spinning
    assert spinner.counter == 0
    assert spinner.parent_enabled


def test_position_centres_on_parent():
    spinner = Spinner()
    x, y = spinner.position(400, 300)
    assert x + spinner.size // 2 == 200
    assert y + spinner.size // 2 == 150
    assert Spinner(center_on_parent=False).position(400, 300) is None