"""Storage adapters."""

from .memory_history_repository import MemoryHistoryRepository

__all__ = ["MemoryHistoryRepository"]
