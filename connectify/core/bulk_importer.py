# connectify/core/bulk_importer.py

import csv
import logging
from pathlib import Path
from typing import Dict

from tqdm import tqdm

from .entities import Company, Person
from .errors import ConnectifyError, DuplicateEntityError
from .model_manager import ModelManager

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("type", "name")


class BulkImporter:
    """
    Imports people and companies from a CSV file into the model.

    Each row has a ``type`` column (``person`` or ``company``) plus the fields of
    that entity. A person row may name a ``company``; the person is then also
    added to that company's people. Bad rows end up in the report instead of
    stopping the import.
    """

    def __init__(self, model: ModelManager, show_progress: bool = True):
        self.model = model
        self.show_progress = show_progress
        self.report = {
            "added": [],
            "duplicates": [],
            "errors": []
        }

    def process_csv(self, csv_path: Path):
        with open(csv_path, 'r', encoding='utf-8', newline='') as f:
            rows = list(csv.DictReader(f))

        for i, row in enumerate(tqdm(rows, desc="Importing", unit="row", disable=not self.show_progress)):
            row_num = i + 2  # header row + 0-based index
            if not all(row.get(key) for key in REQUIRED_COLUMNS):
                self.report["errors"].append(f"Row {row_num}: Missing required columns (type, name).")
                continue
            try:
                self._process_row(row, row_num)
            except DuplicateEntityError:
                self.report["duplicates"].append(f"Row {row_num}: '{row['name'].strip()}' already exists.")
            except ConnectifyError as e:
                self.report["errors"].append(f"Row {row_num}: {e}")

        logger.info(f"Bulk import from '{csv_path.name}' finished: {len(self.report['added'])} added, "
                    f"{len(self.report['duplicates'])} duplicates, {len(self.report['errors'])} errors.")
        return self.report

    def _process_row(self, row: Dict[str, str], row_num: int):
        kind = row["type"].strip().lower()

        def value(key: str) -> str:
            return (row.get(key) or "").strip()

        if kind == "company":
            company = Company(
                value("name"), value("industry"), value("location"), value("description"),
                value("website"), value("email"), value("phone"), value("address"),
            )
            self.model.add_company(company)
            self.report["added"].append(f"Company '{company.name}'.")
        elif kind == "person":
            tags = tuple(t for t in value("tags").split() if t)
            person = Person(value("name"), value("phone"), value("email"), value("address"), value("note"), tags)
            self.model.add_person(person)
            self.report["added"].append(f"Person '{person.name}'.")
            if value("company"):
                self._attach_to_company(person, value("company"), row_num)
        else:
            self.report["errors"].append(f"Row {row_num}: Unknown type '{row['type']}'.")

    def _attach_to_company(self, person: Person, company_name: str, row_num: int):
        for company in self.model.get_address_book().get_company_list():
            if company.name == company_name:
                self.model.set_company(company, company.with_person(person))
                return
        self.report["errors"].append(
            f"Row {row_num}: Company '{company_name}' not found, '{person.name}' was added without a company.")
