"""
Factory for creating short code generation strategies.
Uses caching to avoid creating multiple instances.
"""

from enum import Enum
from shortener_app.services.short_code_strategies import (
    ShortCodeStrategy,
    RandomShortCodeStrategy,
    SecureShortCodeStrategy
)
from shortener_app.config import settings


class ShortCodeStrategyType(Enum):
    """Available short code generation strategies"""
    RANDOM = "random"
    SECURE = "secure"


class ShortCodeFactory:
    """Factory for creating short code generation strategies with caching"""

    _instances = {}  # Cache for strategy instances

    _strategies = {
        ShortCodeStrategyType.RANDOM: RandomShortCodeStrategy,
        ShortCodeStrategyType.SECURE: SecureShortCodeStrategy,
    }

    @classmethod
    def create_strategy(
        cls,
        strategy_type: ShortCodeStrategyType = None
    ) -> ShortCodeStrategy:
        """
        Create or return cached short code generation strategy.

        Args:
            strategy_type: Type of strategy to create (enum member or its value).
                          If None, uses value from settings.

        Returns:
            A cached instance of a ShortCodeStrategy

        Raises:
            ValueError: If strategy_type is unknown
        """
        # Use default from settings if not specified
        if strategy_type is None:
            strategy_type = settings.short_code_strategy

        # Accepts enum members and their string values alike
        strategy_type = ShortCodeStrategyType(strategy_type)

        if strategy_type not in cls._instances:
            cls._instances[strategy_type] = cls._strategies[strategy_type]()
        return cls._instances[strategy_type]

    @classmethod
    def clear_instances(cls):
        """Clear cached instances (for testing)"""
        cls._instances.clear()
