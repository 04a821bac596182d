"""Florist - Procedural flower and mosaic geometry.

Florist synthesizes closed silhouettes (petals and mosaic frames) from polar
curves, converts them into scanline-encoded areas and resolves the occlusion
between stacked layers of petals. The resolved shapes are handed to a renderer
as (skeleton, area) pairs.

Example:
    $ florist 256 --seed 42 --preview

This generates a flower of radius 256 and prints a coarse preview of the
visible regions.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
