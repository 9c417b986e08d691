"""Rendering subpackage.

Turns immutable :class:`~punks_remaster.subject.Subject` records into 24x24
RGBA tiles. The renderer focuses on:

* Tile extraction from the accessory and composite sheets
  (:mod:`punks_remaster.renderer.sprite_store`).
* Deterministic layering of accessories with the remaster corrections applied
  on the way (:mod:`punks_remaster.renderer.compositor`).
* Output sizing and PNG encoding (:mod:`punks_remaster.renderer.output`).

All image work is plain Pillow + NumPy on tiny buffers; nothing here touches
the network or the filesystem.
"""
