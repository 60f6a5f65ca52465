from .history import History
from .assistant import Assistant, Snapshot

__all__ = ["History", "Assistant", "Snapshot"]
