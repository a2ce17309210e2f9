"""Utility helpers package."""
from .helpers import shuffle_in_place, group_by_type

__all__ = ["shuffle_in_place", "group_by_type"]
