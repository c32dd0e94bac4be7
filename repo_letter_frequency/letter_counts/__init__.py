from .aggregate import aggregate
from .count_letters import count_letters

__all__ = ["aggregate", "count_letters"]
