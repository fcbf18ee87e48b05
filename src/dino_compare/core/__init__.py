"""Pure comparison core: plain data in, plain data out."""

from dino_compare.core.assemble import assemble
from dino_compare.core.compare import compare_diet, compare_height, compare_weight
from dino_compare.core.convert import build_record, imperial_height, to_display_units
from dino_compare.core.facts import fact_for_category, select_fact
from dino_compare.core.validate import validate_profile

__all__ = [
    "assemble",
    "build_record",
    "compare_diet",
    "compare_height",
    "compare_weight",
    "fact_for_category",
    "imperial_height",
    "select_fact",
    "to_display_units",
    "validate_profile",
]
