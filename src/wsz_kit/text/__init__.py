"""Parsers for the text config files shipped inside a skin."""

from wsz_kit.text.pledit import PleditSettings, parse_pledit, pledit_from_archive
from wsz_kit.text.region import Regions, parse_regions, regions_from_archive
from wsz_kit.text.viscolor import VisColors, parse_vis_colors, vis_colors_from_archive

__all__ = [
    "PleditSettings",
    "Regions",
    "VisColors",
    "parse_pledit",
    "parse_regions",
    "parse_vis_colors",
    "pledit_from_archive",
    "regions_from_archive",
    "vis_colors_from_archive",
]
