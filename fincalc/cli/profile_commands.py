"""Profile CLI commands for Fin Calc.

Manages planning assumptions (profile.yaml) - state tax rate, inflation,
budget shares and loan defaults.
"""

import click
import yaml

from fincalc.sdk import (
    ConfigNotFoundError,
    get_profile_path,
    get_profile_value,
    load_profile,
    set_profile_value,
)


@click.group()
def profile():
    """Manage your planning assumptions (profile.yaml).

    Keys (dot notation):

    \b
      state_tax_rate           flat state income tax rate, e.g. 0.05
      inflation_rate_percent   default inflation for 'fin-calc inflation'
      budget.needs / wants / savings
      loan.term_months / loan.annual_rate_percent
    """
    pass


@profile.command("show")
def profile_show():
    """Show the active profile and its location."""
    profile_path = get_profile_path(require_exists=False)

    click.echo(f"Profile: {profile_path}")
    if not profile_path.exists():
        click.echo("Location: not created (using defaults)")
    click.echo()

    try:
        current = load_profile()
    except ConfigNotFoundError as e:
        raise click.ClickException(str(e))

    click.echo(yaml.dump(current.model_dump(), default_flow_style=False, sort_keys=False).rstrip())


@profile.command("get")
@click.argument("key")
def profile_get(key):
    """Get a profile value by dot-notation KEY (e.g. budget.needs)."""
    value = get_profile_value(key)
    if value is None:
        raise click.ClickException(f"Key '{key}' not set in profile")

    if isinstance(value, dict):
        click.echo(yaml.dump(value, default_flow_style=False, sort_keys=False).rstrip())
    else:
        click.echo(value)


@profile.command("set")
@click.argument("key")
@click.argument("value")
def profile_set(key, value):
    """Set a profile value.

    KEY is a dot-notation path like 'budget.needs'
    VALUE is the value to set (number, or 'null' to unset)

    Examples:
        fin-calc profile set state_tax_rate 0.0
        fin-calc profile set budget.needs 0.6
        fin-calc profile set loan.annual_rate_percent 7.25
    """
    parsed_value = yaml.safe_load(value)

    try:
        profile_file = set_profile_value(key, parsed_value)
    except ConfigNotFoundError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key} = {parsed_value}")
    click.echo(f"Saved to: {profile_file}")
