"""
Collaborators the game engine is wired to: drawing surfaces, input sources
and schedulers.

The pygame host is not imported here so headless use does not need a display.
"""

from .base import KeyEvent, Surface, InputSource, Scheduler, hex_to_rgb
from .events import EventSource
from .scheduling import RealtimeScheduler, VirtualScheduler
from .image_surface import ImageSurface

__all__ = [
    'KeyEvent', 'Surface', 'InputSource', 'Scheduler', 'hex_to_rgb',
    'EventSource',
    'RealtimeScheduler', 'VirtualScheduler',
    'ImageSurface',
]
