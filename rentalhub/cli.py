import click
from flask.cli import AppGroup

from . import db
from .models import RentalUnit
from .services.photos import get_folder_store

unit_folders = AppGroup("unit-folders", help="Manage the unit -> photo folder mapping.")


@unit_folders.command("show")
def show_mapping():
    mapping = get_folder_store().all()
    if not mapping:
        click.echo("No folder mappings.")
        return
    for unit_id, folder in sorted(mapping.items(), key=lambda item: item[0]):
        click.echo(f"{unit_id}\t{folder}")


@unit_folders.command("set")
@click.argument("unit_id", type=int)
@click.argument("folder")
def set_mapping(unit_id, folder):
    if folder in (".", "..") or "/" in folder or "\\" in folder:
        raise click.ClickException("Folder must be a single directory name under rental_units/")
    if db.session.get(RentalUnit, unit_id) is None:
        raise click.ClickException(f"Rental unit {unit_id} does not exist")
    get_folder_store().set(unit_id, folder)
    click.echo(f"Unit {unit_id} -> {folder}")


@unit_folders.command("unset")
@click.argument("unit_id", type=int)
def unset_mapping(unit_id):
    if not get_folder_store().delete(unit_id):
        raise click.ClickException(f"Unit {unit_id} has no folder mapping")
    click.echo(f"Removed mapping for unit {unit_id}")


def register_cli(app):
    app.cli.add_command(unit_folders)
