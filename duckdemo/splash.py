"""The splash screen: a fading image shown briefly at startup."""

from __future__ import annotations

from dataclasses import dataclass, field

from duckdemo.states import Screen
from duckdemo.theme import Color
from duckdemo.timing import Timer, TimerMode

SPLASH_BACKGROUND_COLOR = Color(0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"


@dataclass
class ImageFadeInOut:
    """Fades an image in, holds it, then fades it out over ``total_duration`` seconds."""

    total_duration: float
    fade_duration: float
    t: float = 0.0

    def __post_init__(self) -> None:
        if self.total_duration <= 0 or self.fade_duration <= 0:
            raise ValueError("fade durations must be positive")

    def alpha(self) -> float:
        """Opacity following a trapezoid: ramp up, flat at 1.0, ramp down."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, dt: float) -> None:
        self.t += dt


@dataclass
class SplashScreen:
    """State of the splash screen while it is shown."""

    fade: ImageFadeInOut = field(
        default_factory=lambda: ImageFadeInOut(
            SPLASH_DURATION_SECS, SPLASH_FADE_DURATION_SECS
        )
    )
    timer: Timer = field(
        default_factory=lambda: Timer.from_seconds(SPLASH_DURATION_SECS, TimerMode.ONCE)
    )
    image: str = SPLASH_IMAGE
    background: Color = SPLASH_BACKGROUND_COLOR
    image_alpha: float = 0.0

    def update(self, dt: float) -> Screen | None:
        """Advance by ``dt`` seconds; returns the next screen once the timer finishes."""
        self.fade.tick(dt)
        self.timer.tick(dt)
        self.image_alpha = self.fade.alpha()
        if self.timer.just_finished:
            return Screen.TITLE
        return None

    def skip(self) -> Screen:
        """Leave the splash screen early."""
        return Screen.TITLE