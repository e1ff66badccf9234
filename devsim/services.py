"""Services the simulator offers models while they run."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass
class Services:
    """A random number generator and the simulation clock."""

    global_rng: random.Random = field(default_factory=random.Random)
    global_time: float = 0.0