"""Annotate documents: one rebuild pass per document over its visible ranges."""

from collections import Counter
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from link_colors.config import Settings
from link_colors.core.colors import ColorSession
from link_colors.core.logging_utils import get_logger
from link_colors.core.palettes import mode_name, resolve_palette_name
from link_colors.core.styles import underline_for_color
from link_colors.scanning.scanner import LinkScanner
from link_colors.scanning.tokenizer import tokenize
from link_colors.scanning.tokens import Annotation, Role

Range = Tuple[int, int]


def build_annotations(
    document: str,
    settings: Settings,
    dark_mode: bool,
    session: ColorSession,
    ranges: Optional[Sequence[Range]] = None,
) -> List[Annotation]:
    """
    Rebuild all annotations for the visible ranges of a document.

    A single scanner runs over the ranges in order, so a link that starts in
    one range keeps its state in the next, unless the hidden text between
    the two ranges contains a line break. Nothing is reused from earlier
    rebuilds except the color session.

    Args:
        document: Full document text
        settings: Coloring settings
        dark_mode: True when rendering against a dark background
        session: Color session shared across rebuilds
        ranges: Visible ``(start, end)`` ranges (default: whole document)

    Returns:
        Annotations in document order
    """
    if ranges is None:
        ranges = [(0, len(document))]

    scanner = LinkScanner(settings, dark_mode, session, document=document)
    annotations = []
    previous_end = None
    for start, end in ranges:
        if previous_end is not None:
            scanner.boundary(document[previous_end:start])
        previous_end = end
        for annotation in scanner.scan(tokenize(document, start, end)):
            if settings.underline_variants:
                annotation = replace(annotation, underline=underline_for_color(annotation.color))
            annotations.append(annotation)
    return annotations


def annotate_files(
    paths: Iterable[Path],
    settings: Settings,
    dark_mode: bool,
    session: Optional[ColorSession] = None,
) -> Dict[Path, List[Annotation]]:
    """
    Annotate markdown files, sharing one color session across all of them.

    Files that cannot be read are reported and skipped.

    Args:
        paths: Markdown files to annotate
        settings: Coloring settings
        dark_mode: True when rendering against a dark background
        session: Color session (a new one is created if omitted)

    Returns:
        Mapping of file path to its annotations
    """
    logger = get_logger()
    session = session if session is not None else ColorSession()
    paths = list(paths)

    results: Dict[Path, List[Annotation]] = {}
    for path in tqdm(paths, desc="Annotating", unit="file", disable=len(paths) < 2):
        try:
            document = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read {path}: {e}")
            continue
        results[path] = build_annotations(document, settings, dark_mode, session)

    return results


def summarize(
    results: Dict[Path, List[Annotation]],
    session: ColorSession,
    settings: Settings,
    dark_mode: bool,
) -> Dict[str, object]:
    """Log summary statistics for an annotation run and return them."""
    logger = get_logger()

    roles = Counter(a.role for annotations in results.values() for a in annotations)
    distinct_colors = {a.color for annotations in results.values() for a in annotations}
    usage = session.usage_counts(settings.palette, dark_mode)

    summary = {
        'files': len(results),
        'target_spans': roles.get(Role.TARGET, 0),
        'alias_spans': roles.get(Role.ALIAS, 0),
        'distinct_colors': len(distinct_colors),
        'palette': resolve_palette_name(settings.palette),
        'mode': mode_name(dark_mode),
        'slot_usage': usage,
    }

    logger.header("Summary")
    logger.info(f"Files annotated: {summary['files']}")
    logger.info(f"Target spans: {summary['target_spans']}")
    logger.info(f"Alias spans: {summary['alias_spans']}")
    logger.info(f"Distinct colors: {summary['distinct_colors']}")
    logger.info(f"Palette: {summary['palette']} ({summary['mode']})")
    logger.info("Slot usage: " + ", ".join(str(count) for count in usage))
    logger.separator(60, "=")
    return summary
