"""Square-wave sound effects on a PWM-driven buzzer."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from enum import IntEnum

CLOCK_HZ = 125_000_000
CLOCK_DIVIDER = 16


class Note(IntEnum):
    """Note frequencies in hertz; ``REST`` is silence."""

    C3 = 131
    CS3 = 139
    D3 = 147
    DS3 = 156
    E3 = 165
    F3 = 175
    FS3 = 185
    G3 = 196
    GS3 = 208
    A3 = 220
    AS3 = 233
    B3 = 247
    C4 = 262
    CS4 = 277
    D4 = 294
    DS4 = 311
    E4 = 330
    F4 = 349
    FS4 = 370
    G4 = 392
    GS4 = 415
    A4 = 440
    AS4 = 466
    B4 = 494
    C5 = 523
    CS5 = 554
    D5 = 587
    DS5 = 622
    E5 = 659
    F5 = 698
    FS5 = 740
    G5 = 784
    GS5 = 831
    A5 = 880
    AS5 = 932
    B5 = 988
    C6 = 1047
    CS6 = 1109
    D6 = 1175
    DS6 = 1245
    E6 = 1319
    F6 = 1397
    FS6 = 1480
    G6 = 1568
    GS6 = 1661
    A6 = 1760
    AS6 = 1865
    B6 = 1976
    REST = 0


def pwm_wrap(frequency: int) -> int:
    """Return the PWM counter wrap value that produces ``frequency`` hertz."""
    if frequency <= 0:
        raise ValueError(f"frequency must be positive: {frequency}")
    return (CLOCK_HZ // (CLOCK_DIVIDER * int(frequency)) - 1) & 0xFFFFFFFF


class PwmDriver:
    """In-memory PWM peripheral that keeps its state and a log of operations."""

    def __init__(self) -> None:
        self.events: list[tuple] = []
        self.pwm_pins: set[int] = set()
        self.levels: dict[int, int] = {}
        self.wraps: dict[int, int] = {}
        self.dividers: dict[int, float] = {}
        self.enabled: dict[int, bool] = {}

    @staticmethod
    def slice_for(pin: int) -> int:
        """Return the PWM slice that drives ``pin``."""
        return (pin >> 1) & 7

    def set_function_pwm(self, pin: int) -> None:
        self.pwm_pins.add(pin)
        self.events.append(("function", pin))

    def set_clkdiv(self, slice_num: int, divider: float) -> None:
        self.dividers[slice_num] = divider
        self.events.append(("clkdiv", slice_num, divider))

    def set_wrap(self, slice_num: int, wrap: int) -> None:
        self.wraps[slice_num] = wrap
        self.events.append(("wrap", slice_num, wrap))

    def set_level(self, pin: int, level: int) -> None:
        self.levels[pin] = level
        self.events.append(("level", pin, level))

    def set_enabled(self, slice_num: int, enabled: bool) -> None:
        self.enabled[slice_num] = enabled
        self.events.append(("enabled", slice_num, enabled))


def _sleep_ms(duration_ms: int) -> None:
    time.sleep(duration_ms / 1000)


class AudioChannel:
    """A buzzer on one pin, with tones, melodies and canned game sounds."""

    def __init__(
        self,
        pin: int,
        driver: PwmDriver | None = None,
        sleep_ms: Callable[[int], object] | None = None,
    ) -> None:
        self.pin = pin
        self.driver = driver if driver is not None else PwmDriver()
        self._sleep = sleep_ms if sleep_ms is not None else _sleep_ms
        self.slice_num = 0
        self.initialized = False

    def init(self) -> None:
        """Route the pin to PWM and find its slice."""
        self.driver.set_function_pwm(self.pin)
        self.slice_num = self.driver.slice_for(self.pin)
        self.initialized = True

    def _set_pwm_frequency(self, frequency: int) -> None:
        if not self.initialized or frequency == 0:
            self.driver.set_level(self.pin, 0)
            return
        wrap = pwm_wrap(frequency)
        self.driver.set_clkdiv(self.slice_num, CLOCK_DIVIDER)
        self.driver.set_wrap(self.slice_num, wrap)
        self.driver.set_level(self.pin, wrap // 2)
        self.driver.set_enabled(self.slice_num, True)

    def play_tone(self, frequency: int, duration_ms: int) -> None:
        """Sound ``frequency`` hertz for ``duration_ms``; 0 is a rest."""
        if frequency == 0:
            self.stop()
            self._sleep(duration_ms)
            return
        self._set_pwm_frequency(frequency)
        self._sleep(duration_ms)
        self.stop()

    def play_note(self, note: Note, duration_ms: int) -> None:
        self.play_tone(int(note), duration_ms)

    def stop(self) -> None:
        """Silence the buzzer."""
        if self.initialized:
            self.driver.set_enabled(self.slice_num, False)
            self.driver.set_level(self.pin, 0)

    def play_melody(self, notes: Iterable[Note], durations: Iterable[int]) -> None:
        """Play notes with matching durations, 10 ms apart."""
        for note, duration in zip(notes, durations, strict=True):
            self.play_note(note, duration)
            self._sleep(10)

    def play_jump(self) -> None:
        for frequency in range(200, 601, 50):
            self.play_tone(frequency, 20)

    def play_coin(self) -> None:
        self.play_note(Note.E5, 50)
        self._sleep(10)
        self.play_note(Note.C6, 100)

    def play_hit(self) -> None:
        self.play_tone(400, 30)
        self.play_tone(200, 30)
        self.play_tone(100, 40)

    def play_death(self) -> None:
        self.play_note(Note.B4, 100)
        self.play_note(Note.F4, 100)
        self.play_note(Note.D4, 100)
        self.play_note(Note.C4, 200)
        self.play_note(Note.G3, 300)

    def play_power_up(self) -> None:
        notes = [Note.C4, Note.E4, Note.G4, Note.C5, Note.G4, Note.C5, Note.E5, Note.C6]
        durations = [50, 50, 50, 50, 50, 50, 50, 150]
        self.play_melody(notes, durations)

    def play_shoot(self) -> None:
        for frequency in range(800, 199, -100):
            self.play_tone(frequency, 15)

    def play_explosion(self) -> None:
        for step in range(15):
            self.play_tone(100 + step * 20, 25)
        self.play_tone(50, 100)

    def play_select(self) -> None:
        self.play_note(Note.A5, 50)
        self._sleep(20)
        self.play_note(Note.A5, 50)

    def play_pause(self) -> None:
        self.play_note(Note.G4, 100)
        self._sleep(50)
        self.play_note(Note.C4, 100)

    def play_victory(self) -> None:
        notes = [Note.C5, Note.C5, Note.C5, Note.C5, Note.G4, Note.A4, Note.B4, Note.C5]
        durations = [100, 100, 100, 300, 100, 100, 100, 400]
        self.play_melody(notes, durations)