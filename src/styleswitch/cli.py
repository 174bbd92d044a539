"""Click CLI for styleswitch."""

import click


@click.group()
def cli():
    """styleswitch: jump between a script file and its stylesheet."""


@cli.command()
@click.argument("project_path", default=".", type=click.Path(exists=True, file_okay=False))
def init(project_path):
    """Initialize a .styleswitch directory with config.toml."""
    from pathlib import Path

    from styleswitch.config import create_default_config

    project = Path(project_path).resolve()
    try:
        config_path = create_default_config(project)
    except FileExistsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Created {config_path}")


def _companion_options(f):
    """Options shared by `resolve` and `switch`."""
    options = [
        click.option("--project", "project_path", default=None,
                     type=click.Path(exists=True, file_okay=False),
                     help="Project root holding .styleswitch/ (default: search upward)."),
        click.option("--css-ext", default=None,
                     help="Extension for a new stylesheet (default: .css)."),
        click.option("--js-ext", default=None,
                     help="Extension for a new script (default: .js)."),
        click.option("--no-directory-name", is_flag=True,
                     help="Disable the index <-> directory-name fallback."),
        click.option("--other-column", is_flag=True,
                     help="Target the other editor column."),
        click.option("-v", "--verbose", is_flag=True, help="Verbose output."),
    ]
    for option in reversed(options):
        f = option(f)
    return f


@cli.command("resolve")
@click.argument("file_path", type=click.Path(dir_okay=False))
@_companion_options
def resolve_cmd(file_path, project_path, css_ext, js_ext, no_directory_name, other_column, verbose):
    """Print the companion resolution of FILE_PATH as JSON."""
    from styleswitch.commands.resolve import run_resolve

    run_resolve(file_path, project_path, css_ext, js_ext, no_directory_name, other_column, verbose)


@cli.command()
@click.argument("file_path", type=click.Path(dir_okay=False))
@_companion_options
@click.option("--active-column", type=click.IntRange(min=1), default=None,
              help="Column of the active editor; prints PATH<TAB>COLUMN.")
@click.option("-y", "--yes", "assume_yes", is_flag=True,
              help="Create a missing companion with the default name.")
@click.option("--edit", is_flag=True, help="Open the companion in $EDITOR.")
def switch(file_path, project_path, css_ext, js_ext, no_directory_name, other_column,
           verbose, active_column, assume_yes, edit):
    """Switch to the companion of FILE_PATH, creating it if needed."""
    from styleswitch.commands.switch import run_switch

    run_switch(
        file_path,
        project_path,
        css_ext,
        js_ext,
        no_directory_name,
        other_column,
        active_column,
        assume_yes,
        edit,
        verbose,
    )
