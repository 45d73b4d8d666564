#!/usr/bin/env python3
"""
Example workflow: Tokenize -> Scan -> Color -> Export

This script demonstrates how to use the link-colors package programmatically
to color the wikilinks of a note the way an editor would on every rebuild.
"""

from pathlib import Path

from link_colors.annotation.annotator import build_annotations
from link_colors.config import Settings
from link_colors.core.colors import ColorSession
from link_colors.core.styles import style_string
from link_colors.io.annotations import annotation_to_dict, save_annotations_json


NOTE = """# Reading list
- [[Data Science]] basics, see also [[Design System|the design system]]
- ![[diagram.png]]
- Character notes: [[Char - Pamela]], [[Pamela]]
"""


def main():
    """Run a complete coloring pass over an in-memory note."""

    settings = Settings(palette="tokyonight", underline_variants=True)
    session = ColorSession()  # keep one per running instance

    print("=" * 60)
    print("Link Colors Workflow")
    print("=" * 60)

    for dark_mode in (True, False):
        mode = "dark" if dark_mode else "light"
        print(f"\n{mode} mode:")
        print("-" * 60)
        annotations = build_annotations(NOTE, settings, dark_mode, session)
        for annotation in annotations:
            data = annotation_to_dict(annotation, NOTE)
            print(f"  {data['role']:<6} {data['color']}  {data['text']}")
        print(f"  style: {style_string(annotations[0].color, annotations[0].underline)}")

    output = Path("results/reading_list.json")
    save_annotations_json({Path("reading_list.md"): build_annotations(NOTE, settings, True, session)},
                          output)

    print("\n" + "=" * 60)
    print(f"Workflow complete! Annotations saved to {output}")
    print("=" * 60)


if __name__ == "__main__":
    main()
