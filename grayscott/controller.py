import dataclasses
import logging
import time
from enum import Enum

from .config import Config
from .render import to_rgba
from .simulation import Field, initialize, step

logger = logging.getLogger(__name__)

SEED_VALUE = 1.0


class State(Enum):
    RUNNING = "running"
    PAUSED = "paused"


class SimulationController:
    """
    Owns the grid and the run/pause state. The front end calls tick()
    once per frame and play/pause/reset/seed from its widgets.
    """

    def __init__(self, config=None):
        self.config = config if config is not None else Config()
        self.state = State.RUNNING
        self.generation = 0
        self.grid = self._initialize()

    @property
    def running(self):
        return self.state is State.RUNNING

    @property
    def parameters(self):
        return self.config.parameters

    def _initialize(self):
        cfg = self.config
        return initialize(cfg.width, cfg.height,
                          seed_half_extent=cfg.seed_half_extent,
                          next_fill=cfg.next_fill)

    def play(self):
        if self.state is not State.RUNNING:
            logger.info("Play at generation %d", self.generation)
        self.state = State.RUNNING

    def pause(self):
        if self.state is not State.PAUSED:
            logger.info("Pause at generation %d", self.generation)
        self.state = State.PAUSED

    def reset(self, parameters=None):
        """Re-initialize the grid, optionally with new parameters, and resume."""
        if parameters is not None:
            self.config = dataclasses.replace(self.config, parameters=parameters)
        self.grid = self._initialize()
        self.generation = 0
        self.state = State.RUNNING
        logger.info("Reset with %s", self.config.parameters)

    def seed(self, x, y):
        """
        Set b=1 at grid cell (x, y) of the current buffer. Coordinates off
        the grid are ignored and False is returned.
        """
        try:
            xi, yi = int(x), int(y)
        except (TypeError, ValueError, OverflowError):
            xi, yi = None, None
        if xi is None or xi != x or yi != y:
            logger.debug("Ignoring seed at non-integral (%r, %r)", x, y)
            return False
        if not (0 <= xi < self.grid.width and 0 <= yi < self.grid.height):
            logger.debug("Ignoring seed outside the grid at (%d, %d)", xi, yi)
            return False
        self.grid.current[Field.B, xi, yi] = SEED_VALUE
        return True

    def frame(self):
        """RGBA pixels of the current grid, without stepping."""
        return to_rgba(self.grid)

    def tick(self):
        """
        Advance one generation and return its RGBA frame if running.
        Returns None while paused; nothing is touched.
        """
        if not self.running:
            return None

        start = time.time()
        step(self.grid, self.config.parameters, copy_border=self.config.copy_border)
        self.generation += 1
        logger.debug("Time for simulation step %d: %.3f s", self.generation, time.time() - start)

        start = time.time()
        pixels = to_rgba(self.grid)
        logger.debug("Time to render: %.3f s", time.time() - start)
        return pixels
