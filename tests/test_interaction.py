"""Unit tests for the pointer interaction state machine."""

import pytest

from hexpicker.picker import Bounds, DragState, PointerTracker, clamp_unit


class TestBounds:
    """Hit-testing and normalization."""

    @pytest.mark.unit
    def test_contains_is_half_open(self):
        bounds = Bounds(width=200, height=100)
        assert bounds.contains(0, 0)
        assert bounds.contains(199.9, 99.9)
        assert not bounds.contains(200, 50)
        assert not bounds.contains(50, 100)
        assert not bounds.contains(-0.1, 50)

    @pytest.mark.unit
    def test_empty_bounds_contain_nothing(self):
        assert Bounds().is_empty
        assert not Bounds().contains(0, 0)
        assert Bounds(width=10, height=0).is_empty
        assert Bounds().normalize(5, 5) == (0.0, 0.0)

    @pytest.mark.unit
    def test_normalize_clamps_to_nearest_edge(self):
        bounds = Bounds(width=200, height=200)
        assert bounds.normalize(50, 150) == (0.25, 0.75)
        assert bounds.normalize(-100, 9999) == (0.0, 1.0)

    @pytest.mark.unit
    def test_clamp_unit(self):
        assert clamp_unit(-3.0) == 0.0
        assert clamp_unit(0.4) == 0.4
        assert clamp_unit(7.0) == 1.0
        assert clamp_unit(float("nan")) == 0.0


class TestPointerTracker:
    """Idle/dragging transitions."""

    @pytest.fixture
    def bounds(self):
        return Bounds(width=200, height=200)

    @pytest.mark.unit
    def test_starts_idle(self):
        tracker = PointerTracker()
        assert tracker.state is DragState.IDLE
        assert not tracker.dragging

    @pytest.mark.unit
    def test_press_inside_starts_drag(self, bounds):
        tracker = PointerTracker()
        assert tracker.press(50, 50, bounds) == (0.25, 0.25)
        assert tracker.dragging

    @pytest.mark.unit
    def test_press_outside_is_ignored(self, bounds):
        tracker = PointerTracker()
        assert tracker.press(250, 50, bounds) is None
        assert tracker.state is DragState.IDLE

    @pytest.mark.unit
    def test_drag_outside_is_clamped(self, bounds):
        tracker = PointerTracker()
        tracker.press(50, 50, bounds)
        assert tracker.move(-100, -100, bounds) == (0.0, 0.0)
        assert tracker.move(9999, 9999, bounds) == (1.0, 1.0)
        assert tracker.move(100, 20, bounds) == (0.5, 0.1)
        assert tracker.dragging

    @pytest.mark.unit
    def test_move_while_idle_is_ignored(self, bounds):
        tracker = PointerTracker()
        assert tracker.move(50, 50, bounds) is None
        assert tracker.state is DragState.IDLE

    @pytest.mark.unit
    def test_release_anywhere_ends_drag(self, bounds):
        tracker = PointerTracker()
        tracker.press(10, 10, bounds)
        tracker.move(5000, -5000, bounds)
        tracker.release()
        assert tracker.state is DragState.IDLE
        assert tracker.move(10, 10, bounds) is None

    @pytest.mark.unit
    def test_release_while_idle_is_harmless(self):
        tracker = PointerTracker()
        tracker.release()
        assert tracker.state is DragState.IDLE

    @pytest.mark.unit
    def test_bounds_can_change_mid_drag(self, bounds):
        tracker = PointerTracker()
        tracker.press(100, 100, bounds)
        assert tracker.move(100, 100, Bounds(width=400, height=400)) == (0.25, 0.25)
