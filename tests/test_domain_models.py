"""Tests for domain models to verify they work correctly."""

import pytest

from nibblefont.domain import (
    ENCODED_SIZE,
    GLYPH_COUNT,
    IMAGE_HEIGHT,
    IMAGE_WIDTH,
    Glyph,
    GlyphCollection,
)


class TestGlyph:
    """Tests for Glyph class."""

    def test_glyph_creation(self) -> None:
        """Test basic glyph creation."""
        glyph = Glyph(rows=(0x08, 0x04, 0x02, 0x01, 0x0F))
        assert glyph.rows == (0x08, 0x04, 0x02, 0x01, 0x0F)

    def test_rows_list_stored_as_tuple(self) -> None:
        """Test that a row list is frozen into a tuple."""
        glyph = Glyph(rows=[1, 2, 3, 4, 5])  # type: ignore[arg-type]
        assert glyph.rows == (1, 2, 3, 4, 5)

    @pytest.mark.parametrize("rows", [(), (0, 0, 0, 0), (0, 0, 0, 0, 0, 0)])
    def test_wrong_row_count(self, rows: tuple[int, ...]) -> None:
        """Test that anything but five rows is rejected."""
        with pytest.raises(ValueError, match="exactly 5 rows"):
            Glyph(rows=rows)

    @pytest.mark.parametrize("value", [-1, 256, 1.5])
    def test_row_out_of_byte_range(self, value: object) -> None:
        """Test that rows must be byte values."""
        with pytest.raises(ValueError, match="byte value"):
            Glyph(rows=(0, 0, value, 0, 0))  # type: ignore[arg-type]

    def test_glyph_immutable(self) -> None:
        """Test that glyph is immutable."""
        glyph = Glyph.blank()
        with pytest.raises(AttributeError):
            glyph.rows = (1, 1, 1, 1, 1)  # type: ignore

    def test_blank(self) -> None:
        """Test blank glyph has no pixels."""
        glyph = Glyph.blank()
        assert glyph.rows == (0, 0, 0, 0, 0)
        assert glyph.is_empty()

    def test_pixel_leftmost_is_high_bit(self) -> None:
        """Test that column 0 maps to bit 3."""
        glyph = Glyph(rows=(0x08, 0, 0, 0, 0x01))
        assert glyph.pixel(0, 0)
        assert not glyph.pixel(3, 0)
        assert glyph.pixel(3, 4)
        assert not glyph.pixel(0, 4)

    def test_pixel_out_of_range(self) -> None:
        """Test pixel lookup outside the cell."""
        with pytest.raises(IndexError):
            Glyph.blank().pixel(4, 0)
        with pytest.raises(IndexError):
            Glyph.blank().pixel(0, 5)

    def test_is_normalized(self) -> None:
        """Test detection of bits above the low nibble."""
        assert Glyph(rows=(0x0F,) * 5).is_normalized()
        assert not Glyph(rows=(0x10, 0, 0, 0, 0)).is_normalized()

    def test_to_bytes(self) -> None:
        """Test raw record output."""
        assert Glyph(rows=(1, 2, 3, 4, 5)).to_bytes() == b"\x01\x02\x03\x04\x05"

    def test_glyph_serialization(self) -> None:
        """Test glyph serialization and deserialization."""
        g1 = Glyph(rows=(0x0A, 0x05, 0x00, 0x0F, 0x09))
        g2 = Glyph.from_dict(g1.to_dict())
        assert g2 == g1

    def test_glyph_hashable(self) -> None:
        """Test equal glyphs hash equal."""
        assert len({Glyph.blank(), Glyph.blank()}) == 1


class TestGlyphCollection:
    """Tests for GlyphCollection class."""

    def test_layout_constants(self) -> None:
        """Test derived layout sizes."""
        assert GLYPH_COUNT == 16
        assert (IMAGE_WIDTH, IMAGE_HEIGHT) == (16, 20)
        assert ENCODED_SIZE == 80

    def test_blank(self) -> None:
        """Test blank collection."""
        font = GlyphCollection.blank()
        assert len(font) == 16
        assert all(glyph.is_empty() for glyph in font)

    @pytest.mark.parametrize("count", [0, 15, 17])
    def test_wrong_glyph_count(self, count: int) -> None:
        """Test that the collection is always sixteen glyphs."""
        with pytest.raises(ValueError, match="exactly 16 glyphs"):
            GlyphCollection(glyphs=(Glyph.blank(),) * count)

    def test_rejects_non_glyph(self) -> None:
        """Test that members must be Glyph instances."""
        members = [Glyph.blank()] * 15 + [(0, 0, 0, 0, 0)]
        with pytest.raises(ValueError, match="Expected Glyph"):
            GlyphCollection(glyphs=tuple(members))  # type: ignore[arg-type]

    def test_indexing_and_iteration(self) -> None:
        """Test sequence access keeps order."""
        font = GlyphCollection.from_rows([(i, 0, 0, 0, 0) for i in range(16)])
        assert font[3].rows[0] == 3
        assert [glyph.rows[0] for glyph in font] == list(range(16))

    def test_no_resizing_api(self) -> None:
        """Test that the collection cannot be grown or replaced."""
        font = GlyphCollection.blank()
        assert not hasattr(font, "append")
        with pytest.raises(AttributeError):
            font.glyphs = ()  # type: ignore

    def test_equality(self) -> None:
        """Test value equality."""
        assert GlyphCollection.blank() == GlyphCollection.blank()
        changed = GlyphCollection.from_rows([(1, 0, 0, 0, 0)] + [(0,) * 5] * 15)
        assert changed != GlyphCollection.blank()

    def test_collection_serialization(self) -> None:
        """Test collection serialization and deserialization."""
        font = GlyphCollection.from_rows([(i, i, 0, 0, 15 - i) for i in range(16)])
        data = font.to_dict()
        assert len(data["glyphs"]) == 16
        assert GlyphCollection.from_dict(data) == font
