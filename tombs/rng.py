import random
from typing import Optional, Tuple


class RNG(random.Random):
    """Seeded RNG with the few rolls the dungeon and its monsters make.

    Every roll goes through randint/random, so one seed replays a whole
    session.
    """

    def coin(self) -> bool:
        """Fair coin; mapgen uses it to pick which way a corridor bends."""
        return self.random() < 0.5

    def stagger(self) -> Tuple[int, int]:
        """Random step in {-1, 0, 1} x {-1, 0, 1}, standing still included."""
        return self.randint(-1, 1), self.randint(-1, 1)

    def interior_cell(self, room) -> Tuple[int, int]:
        """A random cell strictly inside a room's walls."""
        return self.randint(room.x1 + 1, room.x2 - 1), self.randint(room.y1 + 1, room.y2 - 1)


def new_rng(seed: Optional[int] = None) -> RNG:
    rng = RNG()
    rng.seed(seed)
    return rng
