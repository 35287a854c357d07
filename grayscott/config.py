import math
from dataclasses import dataclass, field
from typing import Tuple


# Gray-Scott parameters (original sketch values)
d_a_init = 1.5      # Diffusion rate A
d_b_init = 0.1      # Diffusion rate B
feed_init = 0.055   # Feed
kill_init = 0.062   # Kill

# Grid
width_init = 400
height_init = 400
seed_half_extent_init = 10


@dataclass(frozen=True)
class Parameters:
    """Rates of the Gray-Scott model. Changed only by re-initializing."""
    d_a: float = d_a_init
    d_b: float = d_b_init
    feed: float = feed_init
    kill: float = kill_init

    def __post_init__(self):
        for name in ("d_a", "d_b", "feed", "kill"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and non-negative, got {value}")


@dataclass(frozen=True)
class Config:
    """
    Everything fixed before the first tick.

    next_fill is the (a, b) value the next buffer starts with: (1, 0) by
    default, (1, 1) reproduces the other variant of the sketch.
    copy_border=False leaves the border of the next buffer untouched on
    every step; True carries the current border forward.
    """
    width: int = width_init
    height: int = height_init
    parameters: Parameters = field(default_factory=Parameters)
    seed_half_extent: int = seed_half_extent_init
    next_fill: Tuple[float, float] = (1.0, 0.0)
    copy_border: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.seed_half_extent < 0:
            raise ValueError(f"seed_half_extent must be non-negative, got {self.seed_half_extent}")
        if len(self.next_fill) != 2 or not all(0.0 <= v <= 1.0 for v in self.next_fill):
            raise ValueError(f"next_fill must be an (a, b) pair in [0, 1], got {self.next_fill}")
