"""Dodge the asteroids and catch the coins falling down the screen."""

from __future__ import annotations

import struct
import time
from collections.abc import Callable
from dataclasses import dataclass

from coinfall.assets import (
    ASTEROID_HEIGHT,
    ASTEROID_SPRITE,
    ASTEROID_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_SPRITE,
    PLAYER_WIDTH,
    SILVER_COIN_HEIGHT,
    SILVER_COIN_SPRITE,
    SILVER_COIN_WIDTH,
)
from coinfall.audio import AudioChannel
from coinfall.screen import SCREEN_HEIGHT, SCREEN_WIDTH, FrameBuffer, Screen
from coinfall.sprite import Sprite

BUZZER_PIN = 14
MAX_COINS = 5
MAX_ASTEROIDS = 10
COIN_SPAWN_INTERVAL_MS = 400
ASTEROID_SPAWN_INTERVAL_MS = 50
FRAME_DELAY_MS = 16

_MASK32 = 0xFFFFFFFF


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _monotonic_ms() -> int:
    return (time.monotonic_ns() // 1_000_000) & _MASK32


def _sleep_ms(duration_ms: int) -> None:
    time.sleep(duration_ms / 1000)


@dataclass
class FallingObject:
    """A sprite falling under gravity, present on screen while active."""

    sprite: Sprite
    velocity: float = 0.0
    active: bool = False


class Game:
    """The game state and its per-frame logic."""

    SILVER_COIN_MOVE_SPEED = 0
    ASTEROID_MOVE_SPEED = 10
    PLAYER_MOVE_SPEED = 5
    GRAVITY = _f32(0.3)

    def __init__(
        self,
        screen: Screen | None = None,
        audio: AudioChannel | None = None,
        clock_ms: Callable[[], int] | None = None,
        sleep_ms: Callable[[int], object] | None = None,
    ) -> None:
        self._sleep = sleep_ms if sleep_ms is not None else _sleep_ms
        self._clock = clock_ms if clock_ms is not None else _monotonic_ms
        self.screen = screen if screen is not None else Screen()
        self.audio = audio if audio is not None else AudioChannel(BUZZER_PIN, sleep_ms=self._sleep)
        self.player = Sprite(PLAYER_SPRITE, PLAYER_WIDTH, PLAYER_HEIGHT, 0x0000)
        self.silver_coins: list[FallingObject] = []
        self.asteroids: list[FallingObject] = []
        self.frame_count = 0
        self.silver_coin_last_spawn_time = 0
        self.asteroid_last_spawn_time = 0
        self.old_player_x = 0
        self.old_player_y = 0

    @property
    def display(self) -> FrameBuffer:
        return self.screen.display

    def init(self) -> None:
        """Let the hardware settle, enable sound and clear the display."""
        self._sleep(1000)
        self.audio.init()
        self.display.fill_screen(FrameBuffer.C_BLACK)

    def start(self) -> None:
        """Place the player and create the pools of coins and asteroids."""
        self.player.set_position(120, 280)
        self.old_player_x = self.player.x
        self.old_player_y = self.player.y
        self.silver_coins = [
            FallingObject(Sprite(SILVER_COIN_SPRITE, SILVER_COIN_WIDTH, SILVER_COIN_HEIGHT, 0x0000))
            for _ in range(MAX_COINS)
        ]
        self.asteroids = [
            FallingObject(Sprite(ASTEROID_SPRITE, ASTEROID_WIDTH, ASTEROID_HEIGHT, 0x0000))
            for _ in range(MAX_ASTEROIDS)
        ]
        self.frame_count = 0
        self.silver_coin_last_spawn_time = 0
        self.asteroid_last_spawn_time = 0

    def update(self) -> None:
        """Advance the game by one frame."""
        self.frame_count = (self.frame_count + 1) & _MASK32
        self._handle_input()
        self._handle_collisions()
        self._spawn_coins()
        self._spawn_asteroids()

    def render(self) -> None:
        self.player.draw(self.display)

    def run(self, frames: int | None = None) -> None:
        """Run the frame loop ``frames`` times, or forever when None."""
        count = 0
        while frames is None or count < frames:
            self.update()
            self.render()
            self._sleep(FRAME_DELAY_MS)
            count += 1

    def _handle_input(self) -> None:
        touch = self.screen.read_touch()
        if touch is None:
            return
        touch_x, touch_y = touch
        self.display.fill_rect(
            self.old_player_x, self.old_player_y, PLAYER_WIDTH, PLAYER_HEIGHT, FrameBuffer.C_BLACK
        )
        sprite_x, sprite_y = self.player.x, self.player.y
        if touch_x < sprite_x:
            sprite_x -= self.PLAYER_MOVE_SPEED
        if touch_x > sprite_x:
            sprite_x += self.PLAYER_MOVE_SPEED
        if touch_y < sprite_y:
            sprite_y -= self.PLAYER_MOVE_SPEED
        if touch_y > sprite_y:
            sprite_y += self.PLAYER_MOVE_SPEED
        self.player.set_position(sprite_x, sprite_y)
        self.old_player_x = sprite_x
        self.old_player_y = sprite_y

    def _advance(
        self, objects: list[FallingObject], move_speed: int, on_hit: Callable[[], None]
    ) -> None:
        display = self.display
        for obj in objects:
            if not obj.active:
                continue
            sprite = obj.sprite
            old_y = sprite.y
            obj.velocity = _f32(obj.velocity + self.GRAVITY)
            new_y = old_y + int(obj.velocity) + move_speed
            display.fill_rect(sprite.x, old_y, sprite.width, sprite.height, FrameBuffer.C_BLACK)
            if new_y > SCREEN_HEIGHT:
                obj.active = False
                continue
            sprite.set_position(sprite.x, new_y)
            if self.player.collides_with(sprite):
                obj.active = False
                display.fill_rect(
                    sprite.x, sprite.y, sprite.width, sprite.height, FrameBuffer.C_BLACK
                )
                on_hit()
            else:
                sprite.draw(display)

    def _handle_collisions(self) -> None:
        self._advance(self.silver_coins, self.SILVER_COIN_MOVE_SPEED, self.audio.play_coin)
        self._advance(self.asteroids, self.ASTEROID_MOVE_SPEED, self.audio.play_hit)

    def _spawn(
        self,
        objects: list[FallingObject],
        last_spawn: int,
        interval: int,
        multiplier: int,
        step: int,
        width: int,
    ) -> int:
        current_time = self._clock() & _MASK32
        if (current_time - last_spawn) & _MASK32 <= interval:
            return last_spawn
        for index, obj in enumerate(objects):
            if not obj.active:
                seed = (self.frame_count * multiplier + index * step) & _MASK32
                obj.sprite.set_position(seed % (SCREEN_WIDTH - width), 0)
                obj.velocity = 1.0
                obj.active = True
                return current_time
        return last_spawn

    def _spawn_coins(self) -> None:
        self.silver_coin_last_spawn_time = self._spawn(
            self.silver_coins,
            self.silver_coin_last_spawn_time,
            COIN_SPAWN_INTERVAL_MS,
            37,
            17,
            SILVER_COIN_WIDTH,
        )

    def _spawn_asteroids(self) -> None:
        self.asteroid_last_spawn_time = self._spawn(
            self.asteroids,
            self.asteroid_last_spawn_time,
            ASTEROID_SPAWN_INTERVAL_MS,
            43,
            23,
            ASTEROID_WIDTH,
        )