"""Tile extraction from the fixed-layout sprite sheets."""

from typing import Optional

from PIL import Image

from punks_remaster.catalog.sprites import SHEET_COLUMNS, SPRITE_SIZE
from punks_remaster.errors import NotLoaded, OutOfRange
from punks_remaster.types import SheetId, SpriteIndex, SubjectID


def _as_rgba(sheet: Optional[Image.Image]) -> Optional[Image.Image]:
    if sheet is None or sheet.mode == "RGBA":
        return sheet
    return sheet.convert("RGBA")


class SpriteStore:
    """Holds the loaded sheets and cuts square tiles out of them.

    Both sheets are optional so callers that only composite from sprites can
    skip the large pre-rendered composite. Sheets are treated as read-only;
    every extracted tile is a fresh image owned by the caller.
    """

    accessory_sheet: Optional[Image.Image]
    composite_sheet: Optional[Image.Image]
    unit: int

    def __init__(
        self,
        accessory_sheet: Optional[Image.Image] = None,
        composite_sheet: Optional[Image.Image] = None,
        unit: int = SPRITE_SIZE,
    ):
        self.accessory_sheet = _as_rgba(accessory_sheet)
        self.composite_sheet = _as_rgba(composite_sheet)
        self.unit = unit

    def sheet(self, sheet_id: SheetId) -> Image.Image:
        sheet = (
            self.accessory_sheet
            if sheet_id is SheetId.ACCESSORY
            else self.composite_sheet
        )
        if sheet is None:
            raise NotLoaded(f"{sheet_id} sheet has not been loaded")
        return sheet

    def extract_tile(self, sheet_id: SheetId, index: int) -> Image.Image:
        """Copy tile ``index`` (row-major) out of the given sheet."""
        sheet = self.sheet(sheet_id)
        if index < 0:
            raise OutOfRange(f"Tile index must be non-negative, got {index}")
        columns = SHEET_COLUMNS[sheet_id]
        row, col = divmod(index, columns)
        x0, y0 = col * self.unit, row * self.unit
        if x0 + self.unit > sheet.width or y0 + self.unit > sheet.height:
            raise OutOfRange(
                f"Tile {index} lies outside the {sheet.width}x{sheet.height} {sheet_id} sheet"
            )
        return sheet.crop((x0, y0, x0 + self.unit, y0 + self.unit))

    def extract_sprite(self, index: SpriteIndex) -> Image.Image:
        return self.extract_tile(SheetId.ACCESSORY, index)

    def extract_subject(self, subject_id: SubjectID) -> Image.Image:
        """Original, unremastered tile of a subject from the composite sheet."""
        return self.extract_tile(SheetId.COMPOSITE, subject_id)
