"""Accumulator (hand) slot management and match detection."""
import logging
from typing import List, Optional, Tuple

from ..models.tile import HandSlot, MatchResult, Tile
from ..models.game_settings import (
    Canvas,
    GameRules,
    HandLayout,
    DEFAULT_CANVAS,
    DEFAULT_HAND_LAYOUT,
    DEFAULT_RULES,
)
from ..utils.helpers import group_by_type

logger = logging.getLogger(__name__)

FULL = -1


class HandManager:
    """Fixed-capacity hand where picked tiles wait to be matched.

    Occupied slots always form a contiguous prefix 0..k-1. Held tiles are
    kept sorted by type, so same-type tiles sit next to each other and
    match scanning follows type order.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        rules: GameRules = DEFAULT_RULES,
        layout: HandLayout = DEFAULT_HAND_LAYOUT,
        canvas: Canvas = DEFAULT_CANVAS,
    ):
        self.capacity = capacity if capacity is not None else rules.hand_capacity
        if self.capacity < 1:
            raise ValueError(f"Hand capacity must be positive, got {self.capacity}")
        self.rules = rules
        self.layout = layout
        self.canvas = canvas
        self._slots = self._initialize_slots()

    def _initialize_slots(self) -> List[HandSlot]:
        return [HandSlot(index=i) for i in range(self.capacity)]

    def add(self, tile: Tile) -> int:
        """
        Add a tile to the hand.

        Args:
            tile: Board tile being picked.

        Returns:
            Slot index of the tile after reorganizing, or FULL (-1) when
            no slot is free.

        Raises:
            ValueError: If the tile is already held or matched.
        """
        if tile.is_in_hand or tile.is_matched:
            raise ValueError(f"Tile {tile.id} is not on the board")

        empty_slot = next((slot for slot in self._slots if not slot.is_occupied), None)
        if empty_slot is None:
            return FULL

        tile.is_in_hand = True
        tile.is_accessible = False
        empty_slot.tile = tile

        self._reorganize()

        for slot in self._slots:
            if slot.tile is tile:
                logger.debug("Tile %s (%s) added to slot %d", tile.id, tile.type.name, slot.index)
                return slot.index
        raise RuntimeError(f"Tile {tile.id} lost while reorganizing hand")

    def _reorganize(self) -> None:
        """Sort held tiles by type (stable) and repack them from slot 0."""
        tiles = sorted(self.tiles_in_hand(), key=lambda t: int(t.type))
        self._assign(tiles)

    def compact(self) -> None:
        """Repack held tiles from slot 0 keeping their relative order."""
        self._assign(self.tiles_in_hand())

    def _assign(self, tiles: List[Tile]) -> None:
        for slot in self._slots:
            slot.tile = None
        for slot, tile in zip(self._slots, tiles):
            slot.tile = tile

    def check_match(self) -> MatchResult:
        """
        Look for three held tiles of the same type.

        Types are visited in the order they first appear in the slots;
        the first one with at least three tiles yields its first three.
        """
        match_count = self.rules.match_count

        for tile_type, tiles in group_by_type(self.tiles_in_hand()).items():
            if len(tiles) >= match_count:
                return MatchResult(
                    matched=True,
                    tiles=tiles[:match_count],
                    score_gained=self.rules.score_per_match,
                )

        return MatchResult(matched=False)

    def remove_matched(self, tiles: List[Tile]) -> None:
        """
        Mark tiles as matched and drop them from the hand.

        Tiles not held (e.g. board tiles of a hint) are only marked.

        Raises:
            ValueError: If a tile was already matched.
        """
        for tile in tiles:
            if tile.is_matched:
                raise ValueError(f"Tile {tile.id} is already matched")

        tile_ids = {t.id for t in tiles}
        for slot in self._slots:
            if slot.tile is not None and slot.tile.id in tile_ids:
                slot.tile = None

        for tile in tiles:
            tile.is_matched = True
            tile.is_in_hand = False
            tile.is_accessible = False

        self.compact()
        logger.debug("Removed matched tiles %s", sorted(tile_ids))

    def remove_tile(self, tile: Tile) -> Tile:
        """
        Take a given held tile back and compact the rest.

        As with remove_last, board accessibility is left to the caller.

        Raises:
            ValueError: If the tile is not in the hand.
        """
        for slot in self._slots:
            if slot.tile is tile:
                slot.tile = None
                tile.is_in_hand = False
                self.compact()
                logger.debug("Tile %s taken back from slot %d", tile.id, slot.index)
                return tile
        raise ValueError(f"Tile {tile.id} is not in the hand")

    def remove_last(self) -> Optional[Tile]:
        """
        Take back the tile in the highest occupied slot (undo).

        The tile leaves the hand; its board accessibility is left to the
        caller, which must recompute it.

        Returns:
            The removed tile, or None if the hand is empty.
        """
        for slot in reversed(self._slots):
            if slot.tile is not None:
                tile = slot.tile
                slot.tile = None
                tile.is_in_hand = False
                logger.debug("Tile %s taken back from slot %d", tile.id, slot.index)
                return tile
        return None

    def tiles_in_hand(self) -> List[Tile]:
        """Held tiles in slot order."""
        return [slot.tile for slot in self._slots if slot.tile is not None]

    def slots(self) -> List[HandSlot]:
        """Snapshot of the slots."""
        return [HandSlot(index=slot.index, tile=slot.tile) for slot in self._slots]

    def is_full(self) -> bool:
        return all(slot.is_occupied for slot in self._slots)

    def is_empty(self) -> bool:
        return not any(slot.is_occupied for slot in self._slots)

    def count(self) -> int:
        return sum(1 for slot in self._slots if slot.is_occupied)

    def slot_screen_position(self, slot_index: int) -> Tuple[float, float]:
        """Canvas position of a slot centre; the row is centred horizontally."""
        if not 0 <= slot_index < self.capacity:
            raise ValueError(f"Slot index {slot_index} out of range 0..{self.capacity - 1}")

        layout = self.layout
        total_width = self.capacity * layout.slot_width + (self.capacity - 1) * layout.slot_padding
        start_x = (self.canvas.width - total_width) / 2 + layout.slot_width / 2

        x = start_x + slot_index * (layout.slot_width + layout.slot_padding)
        y = self.canvas.height - layout.bottom_margin
        return x, y

    def reset(self) -> None:
        """Empty every slot. Board tiles are not touched."""
        self._slots = self._initialize_slots()
