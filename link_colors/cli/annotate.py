"""CLI for annotating markdown files with link colors."""

import click
from pathlib import Path
from typing import Optional, Tuple

from link_colors.config import load_config
from link_colors.core.hashing import HashMode
from link_colors.core.palettes import palette_names


@click.command()
@click.argument('files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--palette', type=click.Choice(palette_names()),
              help='Color palette (default from config: vibrant)')
@click.option('--hash-mode', type=click.Choice([m.value for m in HashMode]),
              help='How target text is turned into a palette slot')
@click.option('--ignore-prefix/--no-ignore-prefix', default=None,
              help='Color "Char - Pamela" by "Pamela" only')
@click.option('--underline-variants/--no-underline-variants', default=None,
              help='Attach an underline style as an extra distinctness cue')
@click.option('--mode', type=click.Choice(['dark', 'light']),
              help='Display mode the colors are chosen for')
@click.option('--output', '-o', type=click.Path(path_type=Path),
              help='Output file base path (default: link_colors next to the first file)')
@click.option('--format', '-f', 'output_format', type=click.Choice(['json', 'csv', 'both']),
              help='Output format')
@click.option('--config', type=click.Path(exists=True, path_type=Path),
              help='Path to config file')
@click.option('--debug', is_flag=True, help='Log every color assignment')
@click.option('--quiet', '-q', is_flag=True, help='Only report errors and saved files')
def main(files: Tuple[Path, ...], palette: Optional[str], hash_mode: Optional[str],
         ignore_prefix: Optional[bool], underline_variants: Optional[bool],
         mode: Optional[str], output: Optional[Path], output_format: Optional[str],
         config: Optional[Path], debug: bool, quiet: bool):
    """
    Assign consistent colors to the wikilink targets in markdown files.

    Every [[target]] gets a color derived from its text; aliases in
    [[target|alias]] share the target's color and ![[embeds]] are skipped.
    All files share one color session, so the same target gets the same
    color in every file.
    """
    cfg = load_config(config)

    # CLI args take precedence over config
    if palette is not None:
        cfg.set('palette', palette)
    if hash_mode is not None:
        cfg.set('hash_mode', hash_mode)
    if ignore_prefix is not None:
        cfg.set('ignore_prefix', ignore_prefix)
    if underline_variants is not None:
        cfg.set('underline_variants', underline_variants)
    if mode is not None:
        cfg.set('display.dark_mode', mode == 'dark')
    output_format = output_format or cfg.get('output.format', 'json')

    # Lazy import to speed up CLI startup
    from link_colors.annotation.annotator import annotate_files, summarize
    from link_colors.config import Settings
    from link_colors.core.colors import ColorSession
    from link_colors.core.logging_utils import get_logger
    from link_colors.io.annotations import save_annotations_csv, save_annotations_json

    logger = get_logger(verbose=not quiet)
    logger.set_debug(debug)

    try:
        settings = Settings.from_config(cfg)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'hash_mode'")
    dark_mode = bool(cfg.get('display.dark_mode', True))

    session = ColorSession()
    results = annotate_files(files, settings, dark_mode, session)
    if not results:
        click.echo("[ERROR] No files could be read.", err=True)
        raise SystemExit(1)

    summarize(results, session, settings, dark_mode)

    output_base = output.with_suffix('') if output else files[0].parent / "link_colors"
    if output_format in ('json', 'both'):
        json_path = Path(str(output_base) + ".json")
        save_annotations_json(results, json_path)
        logger.success(f"Saved annotations to {json_path}")
    if output_format in ('csv', 'both'):
        csv_path = Path(str(output_base) + ".csv")
        save_annotations_csv(results, csv_path)
        logger.success(f"Saved annotations to {csv_path}")


if __name__ == '__main__':
    main()
