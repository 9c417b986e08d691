"""Data locations and output bounds.

Defaults follow the data directory layout the sheets and attribute files are
published in. ``PUNKS_REMASTER_DATA_DIR`` relocates the whole tree; each file
can also be overridden on its own.
"""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Union

from punks_remaster.renderer.output import MAX_OUTPUT_SIZE, MIN_OUTPUT_SIZE

DEFAULT_DATA_DIR = "data"

SPRITE_SHEET_RELPATH = "cryptopunks-assets/punks/config/punks-24x24.png"
COMPOSITE_RELPATH = "punks.png"
ATTRIBUTES_RELPATH = "punks-attributes/original/cryptopunks.csv"
ELIGIBLE_RELPATH = "all-eligible-punks.json"


@dataclass(frozen=True)
class RemasterConfig:
    """Where to find the inputs and how large outputs may get.

    Attributes:
        data_dir: Root of the data tree.
        sprite_sheet_path: Accessory sprite sheet (25 columns).
        composite_path: Pre-rendered collection sheet (100 columns).
        attributes_path: Attribute CSV.
        eligible_path: JSON list of eligible subject ids.
        min_output_size: Smallest output edge in pixels.
        max_output_size: Largest output edge in pixels.
    """

    data_dir: Path
    sprite_sheet_path: Path
    composite_path: Path
    attributes_path: Path
    eligible_path: Path
    min_output_size: int = MIN_OUTPUT_SIZE
    max_output_size: int = MAX_OUTPUT_SIZE

    @classmethod
    def for_data_dir(cls, data_dir: Union[str, Path]) -> "RemasterConfig":
        root = Path(data_dir)
        return cls(
            data_dir=root,
            sprite_sheet_path=root / SPRITE_SHEET_RELPATH,
            composite_path=root / COMPOSITE_RELPATH,
            attributes_path=root / ATTRIBUTES_RELPATH,
            eligible_path=root / ELIGIBLE_RELPATH,
        )

    @classmethod
    def from_env(cls) -> "RemasterConfig":
        base = cls.for_data_dir(os.getenv("PUNKS_REMASTER_DATA_DIR", DEFAULT_DATA_DIR))
        return cls(
            data_dir=base.data_dir,
            sprite_sheet_path=Path(
                os.getenv("PUNKS_REMASTER_SPRITE_SHEET", str(base.sprite_sheet_path))
            ),
            composite_path=Path(
                os.getenv("PUNKS_REMASTER_COMPOSITE", str(base.composite_path))
            ),
            attributes_path=Path(
                os.getenv("PUNKS_REMASTER_ATTRIBUTES", str(base.attributes_path))
            ),
            eligible_path=Path(
                os.getenv("PUNKS_REMASTER_ELIGIBLE", str(base.eligible_path))
            ),
            min_output_size=int(
                os.getenv("PUNKS_REMASTER_MIN_SIZE", str(MIN_OUTPUT_SIZE))
            ),
            max_output_size=int(
                os.getenv("PUNKS_REMASTER_MAX_SIZE", str(MAX_OUTPUT_SIZE))
            ),
        )
