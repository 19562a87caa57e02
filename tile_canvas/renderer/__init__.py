"""Rendering subpackage.

Turns tile data into pixels. The renderer focuses on:

* Exact, bounds-safe compositing of 8x8 tiles and 16x16 blocks onto a
  two-plane indexed canvas (:mod:`tile_canvas.renderer.compositor`).
* Priority-aware alpha export so foreground tiles keep more opacity than
  background tiles under a global translucency policy.
* Lightweight NumPy + Pillow export to byte buffers, PIL images and
  paletted PNG files.
* Drawing whole blockmaps through a grid projection
  (:mod:`tile_canvas.renderer.blockmap`).
"""
