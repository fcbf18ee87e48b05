"""dino_compare: compare yourself to the dinosaurs."""

__all__ = [
    "__version__",
    "build_profile",
    "compare_profile",
    "list_dinosaurs",
    "validate_document",
    "ComparisonResult",
]
__version__ = "0.1.0"

from dino_compare.api import (  # noqa: E402, F401
    ComparisonResult,
    build_profile,
    compare_profile,
    list_dinosaurs,
    validate_document,
)
