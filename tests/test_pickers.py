"""Unit tests for the hue and saturation/value pickers."""

from unittest.mock import Mock

import pytest

from hexpicker.models import Color, PickerData, PlaneStrategy
from hexpicker.picker import HueIndicator, HuePicker, PlaneMarker, PlanePicker
from hexpicker.protocols import PickerHost


@pytest.fixture
def hue_picker(host):
    picker = HuePicker(host)
    picker.resize(20, 200)
    return picker


@pytest.fixture
def plane_picker(host):
    picker = PlanePicker(host)
    picker.resize(200, 200)
    return picker


class TestHuePicker:
    """Vertical hue strip."""

    @pytest.mark.unit
    def test_hue_on_black_keeps_color(self, hue_picker, host, black_data):
        """Picking a hue on black moves the picker hue only."""
        assert hue_picker.pointer_pressed(black_data, 10, 50)

        assert black_data.hue == 90.0
        assert black_data.color == Color.black()
        host.request_refresh.assert_called_once()
        host.request_redraw.assert_called_once()

    @pytest.mark.unit
    def test_hue_keeps_saturation_and_value(self, hue_picker):
        data = PickerData.from_color(Color.from_hsv(0.0, 0.5, 0.5))
        hue_picker.pointer_pressed(data, 10, 100)

        hue, saturation, value = data.color.to_hsv()
        assert data.hue == 180.0
        assert hue == pytest.approx(180.0)
        assert saturation == pytest.approx(0.5)
        assert value == pytest.approx(0.5)

    @pytest.mark.unit
    def test_drag_past_bottom_pins_to_360(self, hue_picker, black_data):
        hue_picker.pointer_pressed(black_data, 10, 10)
        hue_picker.pointer_moved(black_data, 500, 10_000)

        assert black_data.hue == 360.0
        assert hue_picker.overlay(black_data).y == 200.0

    @pytest.mark.unit
    def test_drag_past_top_pins_to_0(self, hue_picker, black_data):
        hue_picker.pointer_pressed(black_data, 10, 100)
        hue_picker.pointer_moved(black_data, 10, -40)
        assert black_data.hue == 0.0

    @pytest.mark.unit
    def test_press_outside_is_ignored(self, hue_picker, host, black_data):
        assert not hue_picker.pointer_pressed(black_data, 25, 50)
        assert black_data.hue == 0.0
        host.request_refresh.assert_not_called()
        host.request_redraw.assert_not_called()

    @pytest.mark.unit
    def test_move_without_press_is_ignored(self, hue_picker, host, black_data):
        before = black_data.model_copy()
        assert not hue_picker.pointer_moved(black_data, 10, 50)
        assert black_data == before
        host.request_refresh.assert_not_called()
        host.request_redraw.assert_not_called()

    @pytest.mark.unit
    def test_release_outside_ends_drag(self, hue_picker, black_data):
        hue_picker.pointer_pressed(black_data, 10, 50)
        hue_picker.pointer_moved(black_data, -300, 900)
        hue_picker.pointer_released()

        assert not hue_picker.dragging
        assert not hue_picker.pointer_moved(black_data, 10, 10)
        assert black_data.hue == 360.0

    @pytest.mark.unit
    def test_overlay(self, hue_picker):
        data = PickerData(hue=90.0)
        indicator = hue_picker.overlay(data)
        assert isinstance(indicator, HueIndicator)
        assert indicator.y == 50.0
        assert indicator.width == 20
        assert indicator.thickness == 6.0
        assert indicator.outline == Color.white()

    @pytest.mark.unit
    def test_image_is_built_once(self, hue_picker, black_data):
        first = hue_picker.image(black_data)
        black_data.hue = 200.0
        assert hue_picker.image(black_data) is first
        assert (first.width, first.height) == (1, 256)

    @pytest.mark.unit
    def test_works_without_host(self, black_data):
        picker = HuePicker()
        picker.resize(10, 100)
        assert picker.pointer_pressed(black_data, 5, 25)
        assert black_data.hue == 90.0


class TestPlanePicker:
    """Saturation/value plane."""

    @pytest.mark.unit
    def test_black_scenario(self, host, black_data):
        """Hue first, then a press on the plane colors the selection."""
        hue = HuePicker(host)
        hue.resize(20, 200)
        plane = PlanePicker(host)
        plane.resize(200, 200)

        hue.pointer_pressed(black_data, 10, 50)
        hue.pointer_released()
        plane.pointer_pressed(black_data, 100, 0)

        assert black_data.color == Color.from_hsv(90.0, 0.5, 1.0)
        assert black_data.color.to_rgb8() == (191, 255, 128)
        assert black_data.hue == 90.0
        assert host.request_refresh.call_count == 2

    @pytest.mark.unit
    def test_plane_does_not_change_hue(self, plane_picker):
        data = PickerData(hue=250.0)
        plane_picker.pointer_pressed(data, 0, 199)
        assert data.hue == 250.0

    @pytest.mark.unit
    def test_drag_outside_is_clamped(self, plane_picker, black_data):
        black_data.hue = 30.0
        plane_picker.pointer_pressed(black_data, 100, 100)
        plane_picker.pointer_moved(black_data, 500, -50)
        assert black_data.color == Color.from_hsv(30.0, 1.0, 1.0)

        plane_picker.pointer_moved(black_data, -500, 500)
        assert black_data.color == Color.black()

    @pytest.mark.unit
    def test_top_left_is_white(self, plane_picker, black_data):
        plane_picker.pointer_pressed(black_data, 0, 0)
        assert black_data.color == Color.white()

    @pytest.mark.unit
    def test_every_move_commits(self, plane_picker, host, black_data):
        plane_picker.pointer_pressed(black_data, 10, 10)
        for x in range(20, 60, 10):
            plane_picker.pointer_moved(black_data, x, 10)
        assert host.request_redraw.call_count == 5
        assert host.request_refresh.call_count == 5

    @pytest.mark.unit
    def test_overlay_tracks_color(self, plane_picker):
        data = PickerData.from_color(Color.from_hsv(90.0, 0.25, 0.75))
        marker = plane_picker.overlay(data)
        assert isinstance(marker, PlaneMarker)
        assert marker.x == pytest.approx(50.0)
        assert marker.y == pytest.approx(50.0)
        assert (marker.inner_size, marker.outer_size) == (6.0, 8.0)
        assert marker.inner == Color.white()
        assert marker.outer == Color.black()

    @pytest.mark.unit
    def test_image_follows_hue(self, plane_picker, black_data):
        first = plane_picker.image(black_data)
        assert plane_picker.image(black_data) is first

        black_data.hue = 120.0
        second = plane_picker.image(black_data)
        assert second is not first
        assert second.pixel(255, 0) == (0, 255, 0, 255)
        assert plane_picker.images.generation_count == 2

    @pytest.mark.unit
    def test_overlay_strategy(self, black_data):
        picker = PlanePicker(strategy=PlaneStrategy.OVERLAY, hue=0.0)
        assert picker.images.strategy is PlaneStrategy.OVERLAY
        assert picker.image(black_data).pixel(255, 0) == (255, 0, 0, 255)

    @pytest.mark.unit
    def test_host_protocol(self):
        host = Mock(spec=PickerHost)
        assert isinstance(host, PickerHost)
