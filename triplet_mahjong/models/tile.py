"""Tile, board and hand data models."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Any, Optional


class TileType(IntEnum):
    """Tile suits (crypto memes)."""
    BITCOIN = 0
    ETHEREUM = 1
    DOGE = 2
    PEPE = 3
    SHIBA = 4
    SOLANA = 5
    CARDANO = 6
    POLKADOT = 7
    AVALANCHE = 8
    CHAINLINK = 9
    POLYGON = 10
    LITECOIN = 11


# Presentation attributes per suit
TILE_ATTRIBUTES: Dict[TileType, Dict[str, Any]] = {
    TileType.BITCOIN: {"main": 0xF7931A, "accent": 0xFFA726, "symbol": "₿"},
    TileType.ETHEREUM: {"main": 0x627EEA, "accent": 0x7C4DFF, "symbol": "Ξ"},
    TileType.DOGE: {"main": 0xC3A634, "accent": 0xFDD835, "symbol": "Ð"},
    TileType.PEPE: {"main": 0x3CB043, "accent": 0x66BB6A, "symbol": "🐸"},
    TileType.SHIBA: {"main": 0xFFA000, "accent": 0xFFCA28, "symbol": "🐕"},
    TileType.SOLANA: {"main": 0x9945FF, "accent": 0x14F195, "symbol": "◎"},
    TileType.CARDANO: {"main": 0x0033AD, "accent": 0x2196F3, "symbol": "₳"},
    TileType.POLKADOT: {"main": 0xE6007A, "accent": 0xF06292, "symbol": "●"},
    TileType.AVALANCHE: {"main": 0xE84142, "accent": 0xEF5350, "symbol": "▲"},
    TileType.CHAINLINK: {"main": 0x2A5ADA, "accent": 0x42A5F5, "symbol": "⬡"},
    TileType.POLYGON: {"main": 0x8247E5, "accent": 0xAB47BC, "symbol": "⬢"},
    TileType.LITECOIN: {"main": 0xBFBBBB, "accent": 0xE0E0E0, "symbol": "Ł"},
}


@dataclass(frozen=True)
class TilePosition:
    """Grid position of a tile: column, row and layer (0 = base)."""
    x: int
    y: int
    z: int

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass
class Tile:
    """A tile on the board.

    Flags are updated in place for the whole level; the id never changes
    because presentation objects are keyed by it.
    """
    id: str
    type: TileType
    position: TilePosition
    is_accessible: bool = False
    is_selected: bool = False  # presentation only
    is_in_hand: bool = False
    is_matched: bool = False

    @property
    def is_on_board(self) -> bool:
        """Tile is still on the board (accessible or blocked)."""
        return not self.is_in_hand and not self.is_matched

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "type": int(self.type),
            "position": self.position.to_dict(),
            "is_accessible": self.is_accessible,
            "is_selected": self.is_selected,
            "is_in_hand": self.is_in_hand,
            "is_matched": self.is_matched,
        }


@dataclass
class LevelConfig:
    """Geometry and tile variety of a level."""
    level: int = 1
    rows: int = 4
    cols: int = 5
    layers: int = 2
    tile_types: int = 5  # distinct suits in play
    tiles_per_type: int = 3

    def __post_init__(self):
        """Validate configuration."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Board must have at least one row and column, got {self.rows}x{self.cols}")
        if self.layers < 1:
            raise ValueError(f"Layer count must be positive, got {self.layers}")
        if not 1 <= self.tile_types <= len(TileType):
            raise ValueError(f"tile_types must be between 1 and {len(TileType)}, got {self.tile_types}")
        if self.tiles_per_type != 3:
            raise ValueError("Tiles are always distributed in triplets (tiles_per_type=3)")

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "rows": self.rows,
            "cols": self.cols,
            "layers": self.layers,
            "tile_types": self.tile_types,
            "tiles_per_type": self.tiles_per_type,
        }


@dataclass
class HandSlot:
    """A slot of the accumulator."""
    index: int
    tile: Optional[Tile] = None

    @property
    def is_occupied(self) -> bool:
        return self.tile is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "index": self.index,
            "tile": self.tile.to_dict() if self.tile else None,
            "is_occupied": self.is_occupied,
        }


@dataclass
class MatchResult:
    """Outcome of a hand match check."""
    matched: bool
    tiles: List[Tile] = field(default_factory=list)
    score_gained: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "matched": self.matched,
            "tile_ids": [t.id for t in self.tiles],
            "score_gained": self.score_gained,
        }


class HintSource:
    """Which priority level produced a hint."""
    HAND_PAIR = "hand_pair"          # 2 held + 1 on board
    HAND_SINGLE = "hand_single"      # 1 held + 2 on board
    BOARD_TRIPLET = "board_triplet"  # 3 on board


@dataclass
class HintResult:
    """A resolvable triplet suggested by the hint solver."""
    found: bool
    tiles: List[Tile] = field(default_factory=list)
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "found": self.found,
            "tile_ids": [t.id for t in self.tiles],
            "source": self.source,
        }
