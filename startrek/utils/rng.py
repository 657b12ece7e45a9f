"""Seedable RNG wrapper for deterministic gameplay."""

import random


class GameRNG:
    """Wrapper around Python's random.Random for deterministic game behavior.

    All randomness in the game should go through this class to ensure
    deterministic behavior when using the same seed. Galaxy generation,
    game setup and every command draw from one shared instance, so the
    order of calls is part of the game's behavior.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness (None for an
                unseeded game)
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            Random integer between a and b
        """
        return self.rng.randint(a, b)

    def choice(self, seq):
        """Choose random element from non-empty sequence.

        Args:
            seq: Sequence to choose from

        Returns:
            Random element from sequence
        """
        return self.rng.choice(seq)

    def random(self) -> float:
        """Return random float in [0.0, 1.0).

        Returns:
            Random float between 0.0 and 1.0
        """
        return self.rng.random()

    def legacy_index(self) -> int:
        """Return an integer in 1-8 using the legacy FNR(1) formula.

        The BASIC listing derives grid positions with
        ``INT(RND(1)*7.98+1.01)`` rather than a uniform integer draw. The
        formula is kept so generated galaxies keep their classic balance.

        Returns:
            Random integer between 1 and 8
        """
        return int(self.rng.random() * 7.98 + 1.01)

    def get_state(self):
        """Get the current state of the RNG.

        Returns:
            RNG state tuple that can be used with set_state
        """
        return self.rng.getstate()

    def set_state(self, state):
        """Restore a state captured with get_state.

        Args:
            state: RNG state tuple from get_state
        """
        self.rng.setstate(state)
