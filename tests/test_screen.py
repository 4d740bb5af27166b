import pytest

from coinfall.screen import FrameBuffer, Screen
from coinfall.touch import (
    COMMAND_X,
    COMMAND_Y,
    TouchBus,
    TouchController,
    raw_to_screen_x,
    raw_to_screen_y,
)


def make_screen(readings=None, pressed=False):
    bus = TouchBus(readings=readings or {})
    bus.irq_level = 0 if pressed else 1
    return Screen(touch=TouchController(bus)), bus


def test_new_framebuffer_is_black():
    fb = FrameBuffer()
    assert fb.pixel(0, 0) == FrameBuffer.C_BLACK
    assert fb.pixel(239, 319) == FrameBuffer.C_BLACK


def test_fill_screen_sets_every_pixel():
    fb = FrameBuffer(4, 3)
    fb.fill_screen(FrameBuffer.C_YELLOW)
    assert all(fb.pixel(x, y) == FrameBuffer.C_YELLOW for x in range(4) for y in range(3))


def test_draw_pixel_and_clipping():
    fb = FrameBuffer(10, 10)
    fb.draw_pixel(3, 4, 0x1234)
    fb.draw_pixel(-1, 4, 0xFFFF)
    fb.draw_pixel(10, 4, 0xFFFF)
    assert fb.pixel(3, 4) == 0x1234
    assert fb.pixel(0, 4) == 0


def test_pixel_outside_raises():
    fb = FrameBuffer(10, 10)
    with pytest.raises(IndexError):
        fb.pixel(10, 0)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        FrameBuffer(0, 10)


def test_fill_rect_is_clipped():
    fb = FrameBuffer(10, 10)
    fb.fill_rect(8, 8, 5, 5, 0xAAAA)
    assert fb.pixel(9, 9) == 0xAAAA
    assert fb.pixel(8, 8) == 0xAAAA
    assert fb.pixel(7, 8) == 0


def test_fill_circle_is_symmetric():
    fb = FrameBuffer(20, 20)
    fb.fill_circle(10, 10, 2, FrameBuffer.C_YELLOW)
    assert fb.pixel(10, 10) == FrameBuffer.C_YELLOW
    assert fb.pixel(12, 10) == fb.pixel(8, 10) == fb.pixel(10, 12) == fb.pixel(10, 8)
    assert fb.pixel(12, 12) == FrameBuffer.C_BLACK


def test_fill_circle_negative_radius_raises():
    with pytest.raises(ValueError):
        FrameBuffer().fill_circle(5, 5, -1, 0)


def test_screen_starts_cleared():
    display = FrameBuffer()
    display.fill_screen(0xFFFF)
    Screen(display=display)
    assert display.pixel(5, 5) == FrameBuffer.C_BLACK


def test_released_panel_gives_no_touch():
    screen, _ = make_screen({COMMAND_X: 2000, COMMAND_Y: 2000}, pressed=False)
    assert screen.is_touch_pressed() is False
    assert screen.read_touch() is None


def test_pressed_panel_reads_mapped_point_and_draws_dot():
    screen, _ = make_screen({COMMAND_X: 2000, COMMAND_Y: 2000}, pressed=True)
    assert screen.is_touch_pressed() is True
    point = screen.read_touch()
    assert point == (raw_to_screen_x(2000), raw_to_screen_y(2000))
    x, y = point
    screen.display.fill_circle(x, y, 2, screen.display.C_YELLOW)
    assert screen.display.pixel(x, y) == FrameBuffer.C_YELLOW


def test_touch_on_right_edge_is_rejected():
    screen, _ = make_screen({COMMAND_X: 4000, COMMAND_Y: 2000}, pressed=True)
    assert screen.read_touch() is None


def test_touch_on_bottom_edge_is_rejected():
    screen, _ = make_screen({COMMAND_X: 2000, COMMAND_Y: 381}, pressed=True)
    assert screen.read_touch() is None


def test_read_touch_restores_bus_speed():
    screen, bus = make_screen({COMMAND_X: 2000, COMMAND_Y: 2000}, pressed=True)
    before = bus.baudrate
    screen.read_touch()
    assert bus.baudrate == before
    assert bus.chip_select is True