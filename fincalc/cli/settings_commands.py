"""Settings CLI commands for Fin Calc.

Manages settings.json - data directory and default tax year.
"""

import click

from fincalc.sdk import (
    DEFAULT_TAX_YEAR,
    clear_data_dir,
    get_available_years,
    get_data_path,
    get_setting,
    get_settings_path,
    get_store,
    load_settings,
    set_data_dir,
    set_setting,
)

from .common import INCOME_STATE_KEY, STREAMS_KEY

SAVED_STATE_LABELS = {
    INCOME_STATE_KEY: "income projection",
    STREAMS_KEY: "income streams",
}


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - data_dir: where saved income projections and streams live
    - tax_year: default tax rules year
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if current:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")
    else:
        click.echo("No settings configured (using defaults).")

    click.echo()
    click.echo("Effective values:")
    click.echo(f"  data_dir: {get_data_path()}")
    click.echo(f"  tax_year: {get_setting('tax_year', DEFAULT_TAX_YEAR)}")


@settings.command("data-dir")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Drop the custom data_dir and use the default")
def settings_data_dir(path, clear):
    """Show or move the directory holding saved state.

    Saved income projections and income streams live in state.json under
    this directory. Moving it does not copy existing state.

    Examples:
        fin-calc settings data-dir
        fin-calc settings data-dir ~/finances/fin-calc
        fin-calc settings data-dir --clear
    """
    if clear:
        click.echo("Cleared data_dir setting." if clear_data_dir() else "data_dir was not set.")
    elif path:
        try:
            set_data_dir(path)
        except OSError as e:
            raise click.ClickException(f"Cannot use {path} as data directory: {e}")

    store = get_store()
    saved = [label for key, label in SAVED_STATE_LABELS.items() if store.get(key) is not None]

    source = "settings.json" if get_setting("data_dir") else "default"
    click.echo(f"Data directory: {get_data_path()} ({source})")
    click.echo(f"State file: {store.path}")
    click.echo(f"Saved: {', '.join(saved) if saved else 'nothing yet'}")


@settings.command("tax-year")
@click.argument("year", required=False, type=int)
def settings_tax_year(year):
    """Show or set the default tax rules year.

    Examples:
        fin-calc settings tax-year
        fin-calc settings tax-year 2025
    """
    available = get_available_years()

    if year is None:
        click.echo(f"Default tax year: {get_setting('tax_year', DEFAULT_TAX_YEAR)}")
        click.echo(f"Available: {', '.join(str(y) for y in available)}")
        return

    if year not in available:
        raise click.ClickException(
            f"No tax rules for {year}. Available: {', '.join(str(y) for y in available)}"
        )

    set_setting("tax_year", year)
    click.echo(f"Set tax_year: {year}")
