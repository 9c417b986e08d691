import pytest
from PIL import Image

from punks_remaster.assets import (
    clear_cache,
    load_render_context,
    load_sheet,
    load_sprite_store,
)
from punks_remaster.config import RemasterConfig
from punks_remaster.errors import NotLoaded
from punks_remaster.renderer.compositor import composite_subject
from punks_remaster.types import SheetId
from tests.test_utils import build_sheet, female, make_context, pixel, tile_with


def write_sheets(tmp_path):
    config = RemasterConfig.for_data_dir(tmp_path)
    config.sprite_sheet_path.parent.mkdir(parents=True)
    accessory = make_context().sprites.sheet(SheetId.ACCESSORY)
    accessory.save(config.sprite_sheet_path)
    build_sheet({1: tile_with({(2, 2): (9, 9, 9, 255)})}, columns=100, rows=2).save(
        config.composite_path
    )
    return config


def test_load_sheet_converts_to_rgba(tmp_path) -> None:
    path = tmp_path / "sheet.png"
    Image.new("P", (48, 24)).save(path)
    sheet = load_sheet(path)
    assert sheet.mode == "RGBA"
    assert sheet.size == (48, 24)


def test_load_sprite_store_is_cached(tmp_path) -> None:
    clear_cache()
    config = write_sheets(tmp_path)
    first = load_sprite_store(config.sprite_sheet_path)
    second = load_sprite_store(str(config.sprite_sheet_path))
    assert first is second
    clear_cache()
    assert load_sprite_store(config.sprite_sheet_path) is not first


def test_load_render_context(tmp_path) -> None:
    clear_cache()
    config = write_sheets(tmp_path)
    context = load_render_context(config)
    assert pixel(context.sprites.extract_subject(1), 2, 2) == (9, 9, 9, 255)

    without = load_render_context(config, with_composite=False)
    with pytest.raises(NotLoaded):
        without.sprites.extract_subject(1)
    clear_cache()


def test_loaded_sheet_renders_like_in_memory_sheet(tmp_path) -> None:
    clear_cache()
    config = write_sheets(tmp_path)
    loaded = load_render_context(config, with_composite=False)
    subject = female(["Choker"])
    assert (
        composite_subject(loaded, subject, apply_remasters=True).tobytes()
        == composite_subject(make_context(), subject, apply_remasters=True).tobytes()
    )
    clear_cache()
