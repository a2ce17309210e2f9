"""Board and match engine for a layered triplet-collection mahjong game."""
__version__ = "1.0.0"
