"""I/O utilities for annotation results."""

from link_colors.io.annotations import (
    annotation_to_dict,
    save_annotations_json,
    save_annotations_csv,
    load_annotations_json,
)

__all__ = [
    "annotation_to_dict",
    "save_annotations_json",
    "save_annotations_csv",
    "load_annotations_json",
]
