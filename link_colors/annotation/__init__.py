"""Document-level annotation built on the link scanner."""

from link_colors.annotation.annotator import annotate_files, build_annotations, summarize

__all__ = [
    "annotate_files",
    "build_annotations",
    "summarize",
]
