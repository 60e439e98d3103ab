"""Loads sound effects from a media directory and plays them by name."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from halloween_ninja.checks import check, log
from halloween_ninja.rng import Random

SUPPORTED_EXTENSIONS = ".ogg.flac.wav"


class Sound:
    """Playback state of one loaded sound effect."""

    def __init__(self, path: Path, data: bytes = b"") -> None:
        self.path = path
        self.data = data
        self.volume = 100.0
        self.pitch = 1.0
        self.looping = False
        self.play_count = 0
        self._playing = False

    @property
    def is_playing(self) -> bool:
        return self._playing

    def play(self) -> None:
        self._playing = True
        self.play_count += 1

    def stop(self) -> None:
        self._playing = False


def load_sound(path: Path) -> Optional[Sound]:
    """Read a sound file; return None when it cannot be read or is empty."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return None
    return Sound(Path(path), data) if data else None


Loader = Callable[[Path], Optional[Sound]]


@dataclass
class SoundEffect:
    """A loaded sound and the file name it is found by."""

    filename: str
    sound: Sound


class SoundPlayer:
    """Plays sound effects chosen at random among those whose file name starts with a name."""

    VOLUME_MIN = 0.0
    VOLUME_MAX = 100.0
    VOLUME_INC = VOLUME_MAX / 10.0

    def __init__(
        self, random: Random, loader: Loader = load_sound, media_path: str | Path = "."
    ) -> None:
        self._random = random
        self._loader = loader
        self.media_path = Path(media_path)
        self._is_muted = False
        self._volume = self.VOLUME_MIN + (self.VOLUME_MAX - self.VOLUME_MIN) * 0.5
        self._file_extensions = SUPPORTED_EXTENSIONS
        self._effects: list[SoundEffect] = []

    @property
    def media_path(self) -> Path:
        return self._media_path

    @media_path.setter
    def media_path(self, path: str | Path) -> None:
        self._media_path = Path(path)

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def is_muted(self) -> bool:
        return self._is_muted

    @property
    def effects(self) -> tuple[SoundEffect, ...]:
        return tuple(self._effects)

    def reset(self) -> None:
        self.stop_all()
        self._effects.clear()

    def play(self, name: str, pitch: float = 1.0) -> None:
        if not name or self._volume < 1.0:
            return

        matches = self._find(name)
        if not matches:
            warning = f'WARNING:  No sfx by the name "{name}" is loaded and ready to play'
            self._load_files(name)
            matches = self._find(name)
            check(
                matches,
                "matches",
                f"{warning}, and then an internal error occurred trying to find and load any "
                "with that name.",
            )
            log(
                f"{warning}, but was able to find and load {len(matches)} matching sfx.  So one "
                "of those is gonna play now, but all sfx should be loaded before playing them."
            )

        sound = self._random.choice(matches).sound
        sound.pitch = pitch
        if sound.looping and sound.is_playing:
            return
        sound.play()

    def will_loop(self, name: str, will_loop: bool) -> None:
        check(bool(name), "name", "Name string is empty.")
        for effect in self._find(name):
            effect.sound.looping = will_loop

    def stop(self, name: str) -> None:
        for effect in self._find(name):
            effect.sound.stop()

    def stop_all(self) -> None:
        for effect in self._effects:
            effect.sound.stop()

    def stop_all_looped(self) -> None:
        for effect in self._effects:
            if effect.sound.looping:
                effect.sound.stop()

    def load_all(self) -> None:
        self.reset()
        self._load_files()

    def load(self, *args: str) -> bool:
        """Load every sound whose file name starts with one of the given names."""
        results = [self._load_one(name) for name in args]
        return all(results)

    def set_volume(self, new_volume: float) -> None:
        self._volume = min(max(new_volume, self.VOLUME_MIN), self.VOLUME_MAX)
        for effect in self._effects:
            effect.sound.volume = self._volume

    def volume_up(self) -> None:
        self._is_muted = False
        self.set_volume(self.VOLUME_MIN + self.VOLUME_INC)

    def volume_down(self) -> None:
        if self._is_muted:
            return
        self.set_volume(self._volume - self.VOLUME_INC)

    def mute_button(self) -> None:
        self._is_muted = not self._is_muted
        if self._is_muted:
            self.set_volume(self.VOLUME_MIN)
        else:
            self.set_volume(self._volume)

    def _load_one(self, name: str) -> bool:
        check(bool(name), "name", "Name string is empty.")
        if self._find(name):
            log(
                f'WARNING:  That sfx "{name}" is already loaded.  '
                "Fix your code to only load an sfx once."
            )
            return True
        self._load_files(name)
        return bool(self._find(name))

    def _find(self, name: str) -> list[SoundEffect]:
        if not name:
            return []
        return [effect for effect in self._effects if effect.filename.startswith(name)]

    def _load_files(self, name_must_match: str = "") -> bool:
        check(
            self._media_path.is_dir(),
            "media_path.is_dir()",
            f'The media path "{self._media_path}" does not exist or is not a directory.',
        )
        success = False
        for path in sorted(self._media_path.rglob("*")):
            if self._will_load(path) and self._load_file(path, name_must_match):
                success = True
        check(
            success,
            "success",
            f'No sfx files found by the name "{name_must_match}" in "{self._media_path}".  '
            f"Remember that MP3s are not supported, only {self._file_extensions}",
        )
        return True

    def _load_file(self, path: Path, name_must_match: str = "") -> bool:
        filename = path.name
        if name_must_match and not filename.startswith(name_must_match):
            return False

        sound = self._loader(path)
        check(
            sound is not None,
            "sound is not None",
            f'Found supported sfx file "{path}", but an error occurred while loading it.',
        )

        sound.volume = self._volume if (self._volume > 0.0 and not self._is_muted) else 0.0
        self._effects.append(SoundEffect(filename, sound))
        return True

    def _will_load(self, path: Path) -> bool:
        if not path.is_file():
            return False
        extension = path.suffix
        if len(extension) not in (4, 5):
            return False
        return extension in self._file_extensions