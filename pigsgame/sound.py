"""Named music tracks and sound effects played through the mixer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pygame

logger = logging.getLogger(__name__)

MUSIC_DIR = Path("assets") / "music"
MUSIC_NAMES = ("title_screen", "forest")
SOUND_NAMES = ("hit",)


class SoundHandler:
    """Loads the game's music and sounds and plays them by name.

    Problems are logged as warnings; they never stop the game.
    """

    def __init__(self, base_dir: Union[str, Path] = ".") -> None:
        self.base_dir = Path(base_dir)
        self.music_registry: dict[str, Optional[Path]] = {}
        self.sound_registry: dict[str, Optional[pygame.mixer.Sound]] = {}
        self._mixer_ready = False

    def __enter__(self) -> SoundHandler:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _open_mixer(self) -> None:
        if self._mixer_ready:
            return
        try:
            pygame.mixer.init(frequency=44100, channels=2, buffer=2048)
        except pygame.error as exc:
            logger.warning("Sound could not be initialized: %s", exc)
            return
        self._mixer_ready = True

    def _music_path(self, name: str) -> Path:
        return self.base_dir / MUSIC_DIR / f"{name}.ogg"

    def load(self) -> None:
        """Open the mixer and register every known track and sound."""
        self._open_mixer()
        for name in MUSIC_NAMES:
            path = self._music_path(name)
            if path.is_file():
                self.music_registry[name] = path
            else:
                logger.warning("Unable to load music (filename=%s): no such file", path)
                self.music_registry[name] = None
        for name in SOUND_NAMES:
            path = self._music_path(name)
            sound: Optional[pygame.mixer.Sound] = None
            if not path.is_file():
                logger.warning("Unable to load sound (filename=%s): no such file", path)
            else:
                try:
                    sound = pygame.mixer.Sound(str(path))
                except pygame.error as exc:
                    logger.warning("Unable to load sound (filename=%s): %s", path, exc)
            self.sound_registry[name] = sound

    def play_music(self, music_name: str) -> None:
        """Fade in a track that loops forever."""
        if music_name not in self.music_registry:
            logger.warning(
                'Unknown music named "%s". Perhaps the sound handler isn\'t ready?', music_name
            )
            return
        path = self.music_registry[music_name]
        if path is None:
            logger.warning("Unable to play music: %s was not loaded", music_name)
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(loops=-1, fade_ms=2000)
        except pygame.error as exc:
            logger.warning("Unable to play music: %s", exc)

    def play(self, sound_name: str) -> None:
        """Play a sound effect once on any free channel."""
        if sound_name not in self.sound_registry:
            logger.warning(
                'Unknown sound named "%s". Perhaps the sound handler isn\'t ready?', sound_name
            )
            return
        sound = self.sound_registry[sound_name]
        if sound is None:
            logger.warning("Unable to play sound: %s was not loaded", sound_name)
            return
        try:
            channel = sound.play()
        except pygame.error as exc:
            logger.warning("Unable to play sound: %s", exc)
            return
        if channel is None:
            logger.warning("Unable to play sound: no free channel")

    def close(self) -> None:
        """Forget every loaded sound and shut the mixer down if it was opened here."""
        self.music_registry.clear()
        self.sound_registry.clear()
        if self._mixer_ready:
            pygame.mixer.quit()
            self._mixer_ready = False


sound_handler = SoundHandler()