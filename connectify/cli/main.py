# connectify/cli/main.py

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from connectify.core.bulk_importer import BulkImporter
from connectify.core.commands import (
    COMPANY_SEARCH_FIELDS, PERSON_SEARCH_FIELDS, delete_company_at, delete_person_at, find_companies, find_people,
    note_person_at
)
from connectify.core.config_manager import DEFAULT_CONFIG_FILE, load_or_create_config
from connectify.core.entities import Company, Person
from connectify.core.errors import ConnectifyError
from connectify.core.render import render_entity
from connectify.core.session import Session, start_session
from connectify.utils.logger import setup_logging

console = Console()
logger = logging.getLogger(__name__)


def _print_entities(session: Session, title: str):
    """Prints whatever list the model currently considers active."""
    model = session.model
    table = Table(title=title, style="cyan", title_style="bold magenta")
    table.add_column("#", style="bold", justify="right")
    table.add_column("Type", style="blue")
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Details", style="yellow")

    for i, entity in enumerate(model.get_filtered_entity_list(), start=1):
        card = render_entity(entity, i)
        table.add_row(str(card.index), ", ".join(card.badges), card.title, "\n".join(card.lines))

    console.print(table)
    console.print(f"Showing {model.get_number_of_entities()} entries in '{model.get_curr_entity()}' "
                  f"({model.get_number_of_people()} people, {model.get_number_of_companies()} companies).")


def _fail(error: Exception):
    console.print(f"[bold red]❌ {error}[/bold red]")
    logger.error(f"CLI command failed: {error}")
    raise SystemExit(1)


# --- Command Group ---

@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.version_option(version="1.0", prog_name="Connectify")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              default=DEFAULT_CONFIG_FILE, show_default=True, help="Path to the config file.")
@click.pass_context
def connectify(ctx: click.Context, config_path: Path):
    """
    📇 Connectify - keep track of the people and companies you network with.

    Use `[COMMAND] --help` for more information on a specific command.
    """
    try:
        config = load_or_create_config(config_path)
        setup_logging(config.log_level)
        ctx.obj = start_session(config)
    except ConnectifyError as e:
        _fail(e)


# --- Listing and Searching ---

@connectify.command(name="list")
@click.option('--entity', type=click.Choice(['people', 'companies', 'all']), default='all', show_default=True,
              help="Which entities to list.")
@click.pass_obj
def list_entities(session: Session, entity: str):
    """📋 Lists people, companies, or both."""
    session.model.set_curr_entity(entity)
    _print_entities(session, f"Connectify: {entity}")


@connectify.command(name="find-people")
@click.argument('keywords', nargs=-1, required=True)
@click.option('--by', type=click.Choice(list(PERSON_SEARCH_FIELDS)), default='name', show_default=True,
              help="Which field to search.")
@click.pass_obj
def find_people_command(session: Session, keywords, by: str):
    """🔍 Finds people whose name (or tags) contain any of the KEYWORDS."""
    try:
        count = find_people(session.model, keywords, by)
    except ConnectifyError as e:
        _fail(e)
    _print_entities(session, f"{count} people found")


@connectify.command(name="find-companies")
@click.argument('keywords', nargs=-1, required=True)
@click.option('--by', type=click.Choice(list(COMPANY_SEARCH_FIELDS)), default='name', show_default=True,
              help="Which field to search.")
@click.pass_obj
def find_companies_command(session: Session, keywords, by: str):
    """🔍 Finds companies whose name (or industry) contains any of the KEYWORDS."""
    try:
        count = find_companies(session.model, keywords, by)
    except ConnectifyError as e:
        _fail(e)
    _print_entities(session, f"{count} companies found")


# --- Editing ---

@connectify.command(name="add-person")
@click.option('-n', '--name', required=True, help="Full name.")
@click.option('-p', '--phone', default="", help="Phone number.")
@click.option('-e', '--email', default="", help="Email address.")
@click.option('-a', '--address', default="", help="Postal address.")
@click.option('-t', '--tag', 'tags', multiple=True, help="A tag; can be given more than once.")
@click.pass_obj
def add_person(session: Session, name, phone, email, address, tags):
    """👤 Adds a person to the address book."""
    try:
        person = Person(name, phone, email, address, tags=tags)
        session.model.add_person(person)
        session.save_address_book()
    except ConnectifyError as e:
        _fail(e)
    console.print(f"[bold green]✅ New person added: {person}[/bold green]")


@connectify.command(name="add-company")
@click.option('-n', '--name', required=True, help="Company name.")
@click.option('-i', '--industry', default="", help="Industry the company is in.")
@click.option('-l', '--location', default="", help="City or country.")
@click.option('-d', '--description', default="", help="Short description.")
@click.option('-w', '--website', default="", help="Website URL.")
@click.option('-e', '--email', default="", help="Contact email.")
@click.option('-p', '--phone', default="", help="Contact phone.")
@click.option('-a', '--address', default="", help="Office address.")
@click.pass_obj
def add_company(session: Session, name, industry, location, description, website, email, phone, address):
    """🏢 Adds a company to the address book."""
    try:
        company = Company(name, industry, location, description, website, email, phone, address)
        session.model.add_company(company)
        session.save_address_book()
    except ConnectifyError as e:
        _fail(e)
    console.print(f"[bold green]✅ New company added: {company}[/bold green]")


@connectify.command(name="delete-person")
@click.argument('index', type=int)
@click.pass_obj
def delete_person(session: Session, index: int):
    """🗑️ Deletes the person at INDEX in the people list."""
    try:
        person = delete_person_at(session.model, index)
        session.save_address_book()
    except ConnectifyError as e:
        _fail(e)
    console.print(f"[bold green]Deleted person: {person.name}[/bold green]")


@connectify.command(name="delete-company")
@click.argument('index', type=int)
@click.pass_obj
def delete_company(session: Session, index: int):
    """🗑️ Deletes the company at INDEX in the company list."""
    try:
        company = delete_company_at(session.model, index)
        session.save_address_book()
    except ConnectifyError as e:
        _fail(e)
    console.print(f"[bold green]Deleted company: {company.name}[/bold green]")


@connectify.command()
@click.argument('index', type=int)
@click.option('-r', '--note', default="", help="The note text. Leave empty to remove the note.")
@click.pass_obj
def note(session: Session, index: int, note: str):
    """📝 Adds, replaces or removes the note of the person at INDEX."""
    try:
        person = note_person_at(session.model, index, note)
        session.save_address_book()
    except ConnectifyError as e:
        _fail(e)
    if note:
        console.print(f"[bold green]Added note to person: {person.name}[/bold green]")
    else:
        console.print(f"[bold green]Removed note from person: {person.name}[/bold green]")


# --- Bulk Import ---

@connectify.command(name="import")
@click.argument('csv_path', type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path))
@click.pass_obj
def bulk_import(session: Session, csv_path: Path):
    """📥 Bulk imports people and companies from a CSV file."""
    console.print(f"[bold cyan]Starting bulk import from '{csv_path.name}'...[/bold cyan]")
    try:
        report = BulkImporter(session.model).process_csv(csv_path)
        session.save_address_book()
    except (ConnectifyError, OSError) as e:
        _fail(e)

    table = Table(title="Import Summary", show_header=False)
    table.add_column("Status", style="cyan")
    table.add_column("Count", style="bold magenta")
    table.add_row("Entries Added", str(len(report["added"])))
    table.add_row("Duplicates Skipped", str(len(report["duplicates"])))
    table.add_row("[red]Errors Encountered[/red]", str(len(report["errors"])))
    console.print(table)
    for error in report["errors"]:
        console.print(f"[red]{error}[/red]")
