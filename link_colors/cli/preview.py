"""CLI for previewing palettes."""

import click
from pathlib import Path
from typing import Optional, Tuple

from link_colors.config import load_config
from link_colors.core.hashing import HASH_MODE_DESCRIPTIONS
from link_colors.core.palettes import PALETTES, palette_names


@click.command()
@click.option('--palette', type=click.Choice(palette_names()),
              help='Palette to preview (default from config)')
@click.option('--mode', type=click.Choice(['dark', 'light']),
              help='Display mode to preview')
@click.option('--output', '-o', type=click.Path(path_type=Path),
              default='palette_preview.png', help='Output PNG file')
@click.option('--sample', '-s', 'samples', multiple=True,
              help='Link target to color in the preview (repeatable)')
@click.option('--list', 'list_only', is_flag=True,
              help='List palettes and hash modes, then exit')
@click.option('--config', type=click.Path(exists=True, path_type=Path),
              help='Path to config file')
def main(palette: Optional[str], mode: Optional[str], output: Path,
         samples: Tuple[str, ...], list_only: bool, config: Optional[Path]):
    """
    Render a palette's swatches, optionally with sample link targets.
    """
    cfg = load_config(config)

    if list_only:
        click.echo("Palettes:")
        for name, modes in PALETTES.items():
            click.echo(f"  {name}: {len(modes['dark'])} colors")
        click.echo("\nHash modes:")
        for hash_mode, info in HASH_MODE_DESCRIPTIONS.items():
            click.echo(f"  {hash_mode.value}: {info['name']}")
            click.echo(f"    {info['description']}")
        return

    if palette is not None:
        cfg.set('palette', palette)
    dark_mode = (mode == 'dark') if mode is not None else bool(cfg.get('display.dark_mode', True))

    # Lazy import to avoid loading matplotlib for --list
    from link_colors.config import Settings
    from link_colors.core.preview import render_palette_preview

    try:
        settings = Settings.from_config(cfg)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'hash_mode'")
    render_palette_preview(
        settings.palette,
        dark_mode,
        output_path=output,
        samples=list(samples),
        settings=settings,
    )


if __name__ == '__main__':
    main()
