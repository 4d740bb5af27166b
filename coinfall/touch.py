"""Resistive touch-panel controller read over a shared serial bus."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

START_BIT = 1 << 7
ADDRESS_A2 = 1 << 6
ADDRESS_A1 = 1 << 5
ADDRESS_A0 = 1 << 4
MODE_8BIT = 1 << 3
MODE_12BIT = 0 << 3
SINGLE_ENDED = 1 << 2
DIFFERENTIAL = 0 << 2
POWER_DOWN_1 = 1 << 1
POWER_DOWN_0 = 1 << 0

COMMAND_Y_SINGLE = MODE_12BIT | SINGLE_ENDED | START_BIT | ADDRESS_A0
COMMAND_X_SINGLE = MODE_12BIT | SINGLE_ENDED | START_BIT | ADDRESS_A2 | ADDRESS_A0
COMMAND_Y = MODE_12BIT | START_BIT | ADDRESS_A0
COMMAND_X = MODE_12BIT | START_BIT | ADDRESS_A2 | ADDRESS_A0
COMMAND_Z1 = MODE_12BIT | START_BIT | ADDRESS_A1 | ADDRESS_A0
COMMAND_Z2 = MODE_12BIT | START_BIT | ADDRESS_A2
COMMAND_TEMPERATURE = MODE_12BIT | START_BIT

SAMPLE_COUNT = 5

X_MIN_EDGE = 250
X_MAX_EDGE = 3750
Y_MIN_EDGE = 380
Y_MAX_EDGE = 3780

X_SCREEN_MIN = 0
X_SCREEN_MAX = 239
Y_SCREEN_MIN = 0
Y_SCREEN_MAX = 319

TOUCH_BAUDRATE = 2_000_000
DEFAULT_BAUDRATE = 25_000_000

_MAX_READING = 0x1FFF


def decode_sample(high: int, low: int) -> int:
    """Combine the two reply bytes into the sample, which sits above three padding bits."""
    return (((high & 0xFF) << 8) | (low & 0xFF)) >> 3


def raw_to_screen_x(raw: int) -> int:
    """Map a raw X reading to a screen column."""
    if raw >= X_MAX_EDGE:
        return X_SCREEN_MAX
    if raw <= X_MIN_EDGE:
        return X_SCREEN_MIN
    scaled = (X_SCREEN_MAX * (raw - X_MIN_EDGE)) // (X_MAX_EDGE - X_MIN_EDGE)
    return X_SCREEN_MAX - scaled


def raw_to_screen_y(raw: int) -> int:
    """Map a raw Y reading to a screen row; readings past either edge give row 0."""
    if raw >= Y_MAX_EDGE:
        return Y_SCREEN_MIN
    if raw <= Y_MIN_EDGE:
        return Y_SCREEN_MIN
    scaled = (Y_SCREEN_MAX * (raw - Y_MIN_EDGE)) // (Y_MAX_EDGE - Y_MIN_EDGE)
    return Y_SCREEN_MAX - scaled


def _average_signed16(samples: Iterable[int]) -> int:
    total = ((sum(samples) + 0x8000) & 0xFFFF) - 0x8000
    quotient = abs(total) // SAMPLE_COUNT
    if total < 0:
        quotient = -quotient
    return quotient & 0xFFFF


def _average_unsigned16(samples: Iterable[int]) -> int:
    return (sum(samples) & 0xFFFF) // SAMPLE_COUNT


class TouchBus:
    """In-memory serial bus with a touch controller answering commands from ``readings``.

    ``readings`` maps a command byte to the sample the controller reports for it.
    ``irq_level`` is the pen interrupt line: 0 while the panel is pressed.
    """

    def __init__(
        self,
        baudrate: int = DEFAULT_BAUDRATE,
        readings: Mapping[int, int] | None = None,
    ) -> None:
        self.baudrate = baudrate
        self.readings: dict[int, int] = dict(readings or {})
        self.chip_select = True
        self.irq_level = 1
        self.events: list[tuple] = []
        self._pending = bytearray()

    def set_baudrate(self, baudrate: int) -> None:
        self.baudrate = baudrate
        self.events.append(("baudrate", baudrate))

    def set_chip_select(self, level: bool) -> None:
        self.chip_select = level
        self.events.append(("cs", level))

    def write(self, data: bytes) -> None:
        """Send bytes; a selected controller queues its two-byte reply to each command."""
        self.events.append(("write", bytes(data)))
        if self.chip_select:
            return
        for command in data:
            reading = self.readings.get(command, 0)
            if not 0 <= reading <= _MAX_READING:
                raise ValueError(f"reading out of range for command {command:#04x}: {reading}")
            self._pending[:] = (reading << 3).to_bytes(2, "big")

    def read(self, count: int) -> bytes:
        """Clock in ``count`` bytes; zeros once the reply is used up."""
        chunk = bytes(self._pending[:count]).ljust(count, b"\x00")
        del self._pending[:count]
        self.events.append(("read", chunk))
        return chunk


class TouchController:
    """Touch controller sharing a bus with the display, averaging several samples."""

    def __init__(self, bus: TouchBus | None = None) -> None:
        self.bus = bus if bus is not None else TouchBus()
        self.bus.set_chip_select(True)

    def get_data16(self, command: int) -> int:
        """Run one conversion at the touch bus speed and return its sample."""
        saved_baudrate = self.bus.baudrate
        self.bus.set_baudrate(TOUCH_BAUDRATE)
        self.bus.set_chip_select(False)
        try:
            self.bus.write(bytes([command]))
            high = self.bus.read(1)[0]
            low = self.bus.read(1)[0]
        finally:
            self.bus.set_chip_select(True)
            self.bus.set_baudrate(saved_baudrate)
        return decode_sample(high, low)

    def _samples(self, command: int) -> list[int]:
        return [self.get_data16(command) for _ in range(SAMPLE_COUNT)]

    def x_raw(self) -> int:
        return _average_signed16(self._samples(COMMAND_X))

    def y_raw(self) -> int:
        return _average_signed16(self._samples(COMMAND_Y))

    def x(self) -> int:
        return raw_to_screen_x(self.x_raw())

    def y(self) -> int:
        return raw_to_screen_y(self.y_raw())

    def z1_raw(self) -> int:
        return _average_unsigned16(self._samples(COMMAND_Z1))

    def z2_raw(self) -> int:
        return _average_unsigned16(self._samples(COMMAND_Z2))