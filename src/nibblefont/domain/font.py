"""Fixed-size glyph collection.

A font is always exactly sixteen glyphs. Glyph ``i`` comes from the cell
at grid column ``i % 4`` and grid row ``i // 4`` of the source sheet.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from nibblefont.domain.glyph import GLYPH_HEIGHT, GLYPH_WIDTH, Glyph

GRID_COLUMNS = 4
GRID_ROWS = 4
GLYPH_COUNT = GRID_COLUMNS * GRID_ROWS

IMAGE_WIDTH = GRID_COLUMNS * GLYPH_WIDTH
IMAGE_HEIGHT = GRID_ROWS * GLYPH_HEIGHT

ENCODED_SIZE = GLYPH_COUNT * GLYPH_HEIGHT


@dataclass(frozen=True, slots=True)
class GlyphCollection:
    """An ordered, immutable set of exactly sixteen glyphs.

    Attributes:
        glyphs: The glyphs in sheet scan order
    """

    glyphs: tuple[Glyph, ...]

    def __post_init__(self) -> None:
        glyphs = tuple(self.glyphs)
        if len(glyphs) != GLYPH_COUNT:
            raise ValueError(f"Font needs exactly {GLYPH_COUNT} glyphs, got {len(glyphs)}")
        for glyph in glyphs:
            if not isinstance(glyph, Glyph):
                raise ValueError(f"Expected Glyph, got {type(glyph).__name__}")
        object.__setattr__(self, "glyphs", glyphs)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "GlyphCollection":
        """Build a collection from sixteen sequences of row bytes."""
        return cls(glyphs=tuple(Glyph(rows=tuple(r)) for r in rows))

    @classmethod
    def blank(cls) -> "GlyphCollection":
        """Create a collection of empty glyphs."""
        return cls(glyphs=(Glyph.blank(),) * GLYPH_COUNT)

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> Glyph:
        return self.glyphs[index]

    def __iter__(self) -> Iterator[Glyph]:
        return iter(self.glyphs)

    def is_normalized(self) -> bool:
        """Check that every glyph keeps to the low nibble of each row."""
        return all(glyph.is_normalized() for glyph in self.glyphs)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with a list of serialized glyphs
        """
        return {"glyphs": [glyph.to_dict() for glyph in self.glyphs]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphCollection":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a "glyphs" list

        Returns:
            GlyphCollection instance
        """
        return cls(glyphs=tuple(Glyph.from_dict(g) for g in data["glyphs"]))
