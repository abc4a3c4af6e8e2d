"""Space analysis: footprint reduction and change notification."""

from .analyzer import SpaceAnalyzer, SpaceReduction
from .notifier import SpaceNotifier, SpaceChangedCallback

__all__ = [
    "SpaceAnalyzer",
    "SpaceReduction",
    "SpaceNotifier",
    "SpaceChangedCallback",
]
