"""Audio instances grouped into music and sound effects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class AudioCategory(Enum):
    """Organisational category of a playing sound."""

    MUSIC = "music"
    SOUND_EFFECT = "sound_effect"


class PlaybackMode(Enum):
    """What happens when a sound reaches its end."""

    ONCE = "once"
    LOOP = "loop"
    DESPAWN = "despawn"


@dataclass
class AudioInstance:
    """A sound to play; ``sink_volume`` is set once it is actually playing."""

    handle: Any
    mode: PlaybackMode
    category: AudioCategory
    volume: float = 1.0
    sink_volume: float | None = None

    @property
    def playing(self) -> bool:
        return self.sink_volume is not None


def music(handle: Any) -> AudioInstance:
    """A looping music track."""
    return AudioInstance(handle, PlaybackMode.LOOP, AudioCategory.MUSIC)


def sound_effect(handle: Any) -> AudioInstance:
    """A one-shot sound effect that is discarded when finished."""
    return AudioInstance(handle, PlaybackMode.DESPAWN, AudioCategory.SOUND_EFFECT)


def apply_global_volume(global_volume: float, instances: Iterable[AudioInstance]) -> None:
    """Rescale every already-playing instance to the current global volume."""
    for instance in instances:
        if instance.playing:
            instance.sink_volume = global_volume * instance.volume