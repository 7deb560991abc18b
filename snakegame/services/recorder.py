"""
Replay recording service.

Runs a game headlessly and writes what the screen would have shown:
1. The engine draws onto an ImageSurface (Pillow)
2. A VirtualScheduler drives ticks and the restart delay without sleeping
3. A player presses keys through a KeyboardDriver
4. Frames are written as an animated GIF (Pillow) or an MP4 (MoviePy/FFmpeg),
   depending on the output file extension
"""

import logging
import os
import random
from typing import List, Optional

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image

from adapters.events import EventSource
from adapters.image_surface import ImageSurface
from adapters.scheduling import VirtualScheduler
from config import GameConfig
from engine import GameEngine
from players.base import Player
from players.driver import KeyboardDriver
from players.random_player import RandomPlayer

logger = logging.getLogger(__name__)

# Output settings
DEFAULT_FRAME_WIDTH = 540
DEFAULT_FRAME_HEIGHT = 400


class ReplayRecorder:
    """Record an automatically played game to a GIF or MP4 file"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        width: int = DEFAULT_FRAME_WIDTH,
        height: int = DEFAULT_FRAME_HEIGHT,
        seed: Optional[int] = None,
        player: Optional[Player] = None
    ):
        self.config = (config or GameConfig()).validate()
        self.width = width
        self.height = height
        self.rng = random.Random(seed)
        self.player = player or RandomPlayer(rng=random.Random(seed))
        self.rounds_played = 0

    def record(self, ticks: int) -> List[Image.Image]:
        """
        Play for the given number of tick periods.

        Returns:
            The starting frame plus one frame per tick period. Losses restart
            automatically, so long recordings span several rounds.
        """
        surface = ImageSurface(self.width, self.height)
        events = EventSource()
        scheduler = VirtualScheduler()
        config = self.config.with_overrides(resume_after_loss=True)
        engine = GameEngine(surface, events, scheduler, config=config, rng=self.rng)
        driver = KeyboardDriver(self.player, events, config.keybindings)

        engine.initialize()
        engine.start()
        frames = [surface.snapshot()]
        for i in range(ticks):
            if engine.running:
                driver.press_for(engine.get_current_state())
            scheduler.advance(config.tick_period_ms)
            frames.append(surface.snapshot())
            if i % 100 == 0:
                logger.info("Recorded tick %s/%s", i + 1, ticks)
        engine.close()

        self.rounds_played = engine.rounds_played
        logger.info("Recorded %s frames over %s rounds", len(frames), engine.rounds_played)
        return frames

    def save(self, frames: List[Image.Image], output_path: str) -> str:
        """Write frames to output_path; the extension picks the format."""
        if not frames:
            raise ValueError("No frames to save")

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        extension = os.path.splitext(output_path)[1].lower()
        if extension == ".gif":
            frames[0].save(
                output_path,
                save_all=True,
                append_images=frames[1:],
                duration=self.config.tick_period_ms,
                loop=0,
            )
        elif extension == ".mp4":
            fps = 1000.0 / self.config.tick_period_ms
            clip = ImageSequenceClip([np.array(frame) for frame in frames], fps=fps)
            clip.write_videofile(output_path, codec='libx264', audio=False, logger=None)
        else:
            raise ValueError(f"Unsupported output format '{extension}' (use .gif or .mp4)")

        logger.info("Replay written to %s (%s frames)", output_path, len(frames))
        return output_path

    def record_to(self, output_path: str, ticks: int) -> str:
        return self.save(self.record(ticks), output_path)
