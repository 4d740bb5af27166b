"""A 240x320 RGB565 display with a touch panel sharing its bus."""

from __future__ import annotations

from coinfall.touch import X_SCREEN_MAX, Y_SCREEN_MAX, TouchController

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 320


class FrameBuffer:
    """In-memory RGB565 display; drawing outside the panel is clipped."""

    C_BLACK = 0x0000
    C_WHITE = 0xFFFF
    C_RED = 0xF800
    C_GREEN = 0x07E0
    C_BLUE = 0x001F
    C_YELLOW = 0xFFE0

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"display size must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [self.C_BLACK] * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        return self._pixels[y * self.width + x]

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFF

    def fill_screen(self, color: int) -> None:
        self._pixels = [color & 0xFFFF] * (self.width * self.height)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a rectangle, clipped to the panel."""
        left, top = max(x, 0), max(y, 0)
        right, bottom = min(x + width, self.width), min(y + height, self.height)
        color &= 0xFFFF
        for row in range(top, bottom):
            start = row * self.width
            self._pixels[start + left : start + right] = [color] * max(right - left, 0)

    def fill_circle(self, x: int, y: int, radius: int, color: int) -> None:
        """Fill the disc of ``radius`` centred on ``(x, y)``."""
        if radius < 0:
            raise ValueError(f"radius must not be negative: {radius}")
        limit = radius * radius
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                if dx * dx + dy * dy <= limit:
                    self.draw_pixel(x + dx, y + dy, color)


class Screen:
    """The display together with its touch controller."""

    def __init__(
        self,
        touch: TouchController | None = None,
        display: FrameBuffer | None = None,
    ) -> None:
        self.display = display if display is not None else FrameBuffer()
        self.touch = touch if touch is not None else TouchController()
        self.display.fill_screen(FrameBuffer.C_BLACK)

    def is_touch_pressed(self) -> bool:
        """True while the pen interrupt line is held low."""
        return self.touch.bus.irq_level == 0

    def read_touch(self) -> tuple[int, int] | None:
        """Return the touched ``(x, y)``, or None if nothing usable is touched."""
        if not self.is_touch_pressed():
            return None
        x = self.touch.x()
        y = self.touch.y()
        if x >= X_SCREEN_MAX or y >= Y_SCREEN_MAX:
            return None
        return x, y