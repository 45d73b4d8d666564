"""Saving and loading annotation results."""

from pathlib import Path
from typing import Dict, List, Optional
import csv
import json

from link_colors.core.logging_utils import get_logger
from link_colors.scanning.tokens import Annotation

CSV_FIELDS = [
    'file', 'span_start', 'span_end', 'role', 'color',
    'underline_style', 'underline_thickness', 'underline_offset',
]


def annotation_to_dict(annotation: Annotation, document: Optional[str] = None) -> Dict:
    """
    Convert an annotation to a JSON-serializable dict.

    Args:
        annotation: Annotation to convert
        document: Source text; when given, the covered text is included

    Returns:
        Dictionary with span, role, color and optional underline
    """
    data = {
        'span_start': annotation.span_start,
        'span_end': annotation.span_end,
        'role': annotation.role.value,
        'color': annotation.color,
    }
    if document is not None:
        data['text'] = document[annotation.span_start:annotation.span_end]
    if annotation.underline is not None:
        data['underline'] = annotation.underline.to_dict()
    return data


def save_annotations_json(results: Dict[Path, List[Annotation]], output_path: Path) -> None:
    """
    Save per-file annotations to a JSON file.

    Args:
        results: Mapping of file path to annotations
        output_path: Path to output JSON file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        str(path): [annotation_to_dict(a) for a in annotations]
        for path, annotations in results.items()
    }
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)


def save_annotations_csv(results: Dict[Path, List[Annotation]], output_path: Path) -> None:
    """Save per-file annotations as one CSV row per annotation."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for path, annotations in results.items():
            for a in annotations:
                underline = a.underline
                writer.writerow({
                    'file': str(path),
                    'span_start': a.span_start,
                    'span_end': a.span_end,
                    'role': a.role.value,
                    'color': a.color,
                    'underline_style': underline.style if underline else '',
                    'underline_thickness': underline.thickness if underline else '',
                    'underline_offset': underline.offset if underline else '',
                })


def load_annotations_json(input_path: Path) -> Optional[Dict]:
    """
    Load annotations saved by ``save_annotations_json``.

    Args:
        input_path: Path to annotations JSON file

    Returns:
        Loaded mapping of file name to annotation dicts, or None if loading failed
    """
    if not input_path.exists():
        return None

    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        get_logger().error(f"Error loading annotations from {input_path}: {e}")
        return None
