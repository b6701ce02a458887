"""
chestconverter CLI - Command-line interface for converting chest textures
"""

import logging
import sys

import click

from chestconverter import __version__
from chestconverter.convert import convert_both, convert_double, convert_single
from chestconverter.exceptions import AtlasDecodeError, AtlasEncodeError, AtlasGeometryError
from chestconverter.schema.layout import ConversionOptions


def _setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _run_jobs(job, names, verbose):
    """Run one conversion per name, stopping at the first failure."""
    try:
        for name in names:
            if verbose:
                click.echo(f"Converting: {name}")
            outputs = job(name)
            if not isinstance(outputs, tuple):
                outputs = (outputs,)
            for path in outputs:
                click.echo(f"  → {path}")

        click.secho(f"✓ Success! Converted {len(names)} texture(s)", fg='green')

    except AtlasDecodeError as e:
        click.secho(f"Read Error: {e}", fg='red', err=True)
        sys.exit(1)
    except AtlasEncodeError as e:
        click.secho(f"Write Error: {e}", fg='red', err=True)
        sys.exit(1)
    except AtlasGeometryError as e:
        click.secho(f"Geometry Error: {e}", fg='red', err=True)
        sys.exit(1)
    except Exception as e:
        click.secho(f"Unexpected error: {e}", fg='red', err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    chestconverter - Convert legacy chest textures to the split chest format.

    Examples:
        chestconverter single old/ new/ normal trapped
        chestconverter double old/ new/ normal
        chestconverter both old/ new/ christmas
    """
    pass


@cli.command()
@click.argument('from_dir', type=click.Path(exists=True, file_okay=False))
@click.argument('to_dir', type=click.Path(exists=True, file_okay=False))
@click.argument('names', nargs=-1, required=True)
@click.option('--flip-single', is_flag=True, help='Keep front and back in place (for textures with them exchanged)')
@click.option('--debug', is_flag=True, help='Paint face highlight colours under the converted pixels')
@click.option('--verbose', '-v', is_flag=True, help='Show detailed conversion info')
def single(from_dir, to_dir, names, flip_single, debug, verbose):
    """
    Convert single chest textures (NAME.png).

    Examples:
        chestconverter single old/ new/ normal
        chestconverter single old/ new/ ender --flip-single
    """
    _setup_logging(verbose)
    options = ConversionOptions(flip_single=flip_single, debug=debug)
    _run_jobs(lambda name: convert_single(from_dir, to_dir, name, options), names, verbose)


@cli.command()
@click.argument('from_dir', type=click.Path(exists=True, file_okay=False))
@click.argument('to_dir', type=click.Path(exists=True, file_okay=False))
@click.argument('names', nargs=-1, required=True)
@click.option('--debug', is_flag=True, help='Paint face highlight colours under the converted pixels')
@click.option('--verbose', '-v', is_flag=True, help='Show detailed conversion info')
def double(from_dir, to_dir, names, debug, verbose):
    """
    Split double chest textures (NAME_double.png) into NAME_left.png and NAME_right.png.

    Examples:
        chestconverter double old/ new/ normal trapped
    """
    _setup_logging(verbose)
    options = ConversionOptions(debug=debug)
    _run_jobs(lambda name: convert_double(from_dir, to_dir, name, options), names, verbose)


@cli.command()
@click.argument('from_dir', type=click.Path(exists=True, file_okay=False))
@click.argument('to_dir', type=click.Path(exists=True, file_okay=False))
@click.argument('names', nargs=-1, required=True)
@click.option('--flip-single', is_flag=True, help='Keep front and back of the single chest in place')
@click.option('--debug', is_flag=True, help='Paint face highlight colours under the converted pixels')
@click.option('--verbose', '-v', is_flag=True, help='Show detailed conversion info')
def both(from_dir, to_dir, names, flip_single, debug, verbose):
    """
    Convert both the single and the double textures of each name.

    Examples:
        chestconverter both old/ new/ christmas
    """
    _setup_logging(verbose)
    options = ConversionOptions(flip_single=flip_single, debug=debug)
    _run_jobs(lambda name: convert_both(from_dir, to_dir, name, options), names, verbose)


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
