"""
Short code generation strategies for URL shortener.
Uses Strategy Pattern to allow different randomness sources.
"""

import random
import secrets
import string
from abc import ABC, abstractmethod


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    # a-z, A-Z, 0-9 = 62 characters
    characters = string.ascii_letters + string.digits

    def generate(self, length: int) -> str:
        """
        Generate a short code.

        Every character is picked independently and uniformly from
        the 62-character alphanumeric alphabet. Uniqueness is NOT
        guaranteed; the caller decides what to do with duplicates.

        Args:
            length: Exact number of characters to produce

        Returns:
            A random short code string

        Raises:
            ValueError: If length is not a positive integer
        """
        if length <= 0:
            raise ValueError(f"Short code length must be positive, got {length}")
        return ''.join(self._choice(self.characters) for _ in range(length))

    @abstractmethod
    def _choice(self, characters: str) -> str:
        """Pick one character from the alphabet"""
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Pseudo-random generation strategy (Mersenne Twister).

    Pros: Fast, reproducible with a seed (handy in tests)
    Cons: Predictable sequence, codes can be enumerated
    """

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def _choice(self, characters: str) -> str:
        return self._random.choice(characters)


class SecureShortCodeStrategy(ShortCodeStrategy):
    """
    Cryptographically secure generation strategy.

    Pros: Unguessable codes, nobody can walk the keyspace
    Cons: Slightly slower than the PRNG
    """

    def _choice(self, characters: str) -> str:
        return secrets.choice(characters)
