# tests/test_storage.py

import json

import pytest

from connectify.core.address_book import AddressBook
from connectify.core.bulk_importer import BulkImporter
from connectify.core.config_manager import Config, load_or_create_config, read_config
from connectify.core.entities import Company, Person
from connectify.core.errors import DataLoadingError, IllegalValueError
from connectify.core.model_manager import ModelManager
from connectify.core.sample_data import get_sample_address_book
from connectify.core.session import start_session
from connectify.core.storage import (
    MISSING_FIELD_MESSAGE_FORMAT, JsonAddressBookStorage, company_from_dict, company_to_dict, load, save
)
from connectify.core.user_prefs import GuiSettings, UserPrefs, read_user_prefs, save_user_prefs

COMPANY_1 = Company("Google", "Technology", "Singapore", "Search", "https://google.com", "hr@google.com",
                    "65218000", "70 Pasir Panjang Road",
                    people=(Person("Alice Pauline", "94351253", note="Recruiter", tags=("hr",)),))


@pytest.fixture
def valid_company_data():
    return company_to_dict(COMPANY_1)


# --- JSON adapted company ---

def test_company_from_dict_valid_details_returns_company(valid_company_data):
    """Test loading a valid stored company."""
    assert company_from_dict(valid_company_data) == COMPANY_1


@pytest.mark.parametrize("field", [
    "name", "industry", "location", "description", "website", "email", "phone", "address",
])
def test_company_from_dict_missing_field_raises(valid_company_data, field):
    """Test the message for each missing company field."""
    valid_company_data[field] = None
    with pytest.raises(IllegalValueError) as excinfo:
        company_from_dict(valid_company_data)
    assert str(excinfo.value) == MISSING_FIELD_MESSAGE_FORMAT.format(field.capitalize())


def test_missing_phone_message():
    """Test the message when the phone key is absent."""
    data = company_to_dict(COMPANY_1)
    del data["phone"]
    with pytest.raises(IllegalValueError, match="Phone field is missing!"):
        company_from_dict(data)


# --- Address book file ---

def test_save_then_read_round_trips(tmp_path):
    """Test that a saved book reads back equal."""
    book = get_sample_address_book()
    path = tmp_path / "data" / "connectify.json"

    save(book, path)

    assert load(path) == book


def test_read_missing_file_returns_none(tmp_path):
    """Test reading a data file that does not exist."""
    assert JsonAddressBookStorage(tmp_path / "nope.json").read_address_book() is None


def test_read_invalid_json_raises_data_loading_error(tmp_path):
    """Test that malformed JSON is a DataLoadingError."""
    path = tmp_path / "broken.json"
    path.write_text("{ not json")
    with pytest.raises(DataLoadingError):
        load(path)


@pytest.mark.parametrize("data, message", [
    ({"persons": [{"name": "Bob", "phone": 91234567}]}, "Phone field must be a string!"),
    ({"persons": [{"name": "Bob", "tags": "friends"}]}, "Tags field must be a list!"),
    ({"persons": {"name": "Bob"}}, "Persons field must be a list!"),
    ({"companies": [dict(company_to_dict(COMPANY_1), people="Alice")]}, "People field must be a list!"),
    ({"persons": [{"name": ["Bob"]}]}, "Name field must be a string!"),
])
def test_read_wrongly_typed_fields_raises(tmp_path, data, message):
    """Test that fields of the wrong JSON type are rejected instead of coerced."""
    path = tmp_path / "typed.json"
    path.write_text(json.dumps(data))
    with pytest.raises(IllegalValueError) as excinfo:
        load(path)
    assert str(excinfo.value) == message


def test_read_null_collections_gives_empty_book(tmp_path):
    """Test that null person and company lists load as empty ones."""
    path = tmp_path / "nulls.json"
    path.write_text(json.dumps({"persons": None, "companies": None}))
    assert load(path) == AddressBook()


def test_read_invalid_utf8_raises_data_loading_error(tmp_path):
    """Test that a file that is not UTF-8 is a DataLoadingError."""
    path = tmp_path / "latin.json"
    path.write_bytes(b'{"persons": [{"name": "\xff\xfe"}]}')
    with pytest.raises(DataLoadingError):
        load(path)


def test_read_duplicate_people_raises(tmp_path):
    """Test that a file with duplicate people is rejected."""
    path = tmp_path / "dupes.json"
    path.write_text(json.dumps({"persons": [{"name": "Alice"}, {"name": "Alice"}], "companies": []}))
    with pytest.raises(IllegalValueError):
        load(path)


def test_save_keeps_backup_of_previous_file(tmp_path):
    """Test that a save keeps the previous file as .json.bak."""
    path = tmp_path / "connectify.json"
    first = AddressBook()
    first.add_person(Person("Alice"))
    save(first, path)

    second = AddressBook()
    second.add_person(Person("Bob"))
    save(second, path)

    backup = json.loads(path.with_suffix(".json.bak").read_text())
    assert backup["persons"][0]["name"] == "Alice"
    assert load(path) == second


# --- Preferences and config ---

def test_user_prefs_round_trip(tmp_path):
    """Test saving and reading user prefs."""
    prefs = UserPrefs(GuiSettings(900, 700, 5, 6), tmp_path / "book.json")
    path = tmp_path / "preferences.json"
    save_user_prefs(prefs, path)
    assert read_user_prefs(path) == prefs


def test_user_prefs_missing_file_gives_defaults(tmp_path):
    """Test that missing prefs fall back to defaults."""
    assert read_user_prefs(tmp_path / "missing.json") == UserPrefs()


def test_user_prefs_corrupt_file_raises(tmp_path):
    """Test that corrupt prefs are a DataLoadingError."""
    path = tmp_path / "preferences.json"
    path.write_text("[1, 2")
    with pytest.raises(DataLoadingError):
        read_user_prefs(path)


def test_load_or_create_config_writes_defaults(tmp_path):
    """Test that a missing config is created with defaults."""
    path = tmp_path / "config.json"
    assert load_or_create_config(path) == Config()
    assert read_config(path) == Config()


def test_read_config_invalid_utf8_raises(tmp_path):
    """Test that a config file that is not UTF-8 is a DataLoadingError."""
    path = tmp_path / "config.json"
    path.write_bytes(b'{"log_level": "\xff"}')
    with pytest.raises(DataLoadingError):
        read_config(path)


def test_read_config_unknown_log_level_falls_back(tmp_path):
    """Test that an unknown log level falls back to INFO."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "chatty"}))
    assert read_config(path).log_level == "INFO"


# --- Session start-up ---

def test_start_session_seeds_sample_data(tmp_path):
    """Test that a missing data file starts with sample data."""
    config = Config(user_prefs_file_path=tmp_path / "preferences.json")
    save_user_prefs(UserPrefs(address_book_file_path=tmp_path / "book.json"), config.user_prefs_file_path)

    session = start_session(config)

    assert session.model.get_address_book() == get_sample_address_book()
    session.save_address_book()
    assert (tmp_path / "book.json").exists()


@pytest.mark.parametrize("payload", [
    b"garbage",
    b'{"persons": [{"name": "\xff\xfe"}]}',
    b'{"persons": null, "companies": null}',
    b'{"persons": [{"name": "Bob", "phone": 91234567}]}',
    b'{"persons": [{"name": "Bob", "tags": "friends"}]}',
    b'{"companies": [{"name": "Grab"}]}',
    b"[1, 2, 3]",
], ids=["not-json", "not-utf8", "null-lists", "number-phone", "string-tags", "missing-fields", "not-an-object"])
def test_start_session_with_corrupt_data_starts_empty(tmp_path, payload):
    """Test that any unreadable data file starts an empty session instead of crashing."""
    (tmp_path / "book.json").write_bytes(payload)
    config = Config(user_prefs_file_path=tmp_path / "preferences.json")
    save_user_prefs(UserPrefs(address_book_file_path=tmp_path / "book.json"), config.user_prefs_file_path)

    session = start_session(config)

    assert session.model.get_address_book() == AddressBook()


# --- Bulk import ---

def test_bulk_import_adds_people_and_companies(tmp_path):
    """Test a mixed CSV with duplicates and bad rows."""
    csv_path = tmp_path / "contacts.csv"
    csv_path.write_text(
        "type,name,industry,phone,email,tags,company\n"
        "company,Grab,Transport,62288000,,,\n"
        "person,Alex Yeoh,,87438807,alex@example.com,friends colleagues,Grab\n"
        "person,Alex Yeoh,,,,,\n"
        "person,Bad Email,,,nope,,\n"
        "robot,R2D2,,,,,\n"
        ",,,,,,\n",
        encoding="utf-8",
    )
    model = ModelManager()

    report = BulkImporter(model, show_progress=False).process_csv(csv_path)

    assert len(report["added"]) == 2
    assert len(report["duplicates"]) == 1
    assert len(report["errors"]) == 3
    person = model.get_address_book().get_person_list()[0]
    assert person.tags == ("friends", "colleagues")
    grab = model.get_address_book().get_company_list()[0]
    assert grab.people == (person,)
    assert model.get_curr_entity() == "companies"


def test_bulk_import_unknown_company_is_reported(tmp_path):
    """Test a person row naming a company that does not exist."""
    csv_path = tmp_path / "contacts.csv"
    csv_path.write_text("type,name,company\nperson,Alex Yeoh,Nowhere Inc\n", encoding="utf-8")
    model = ModelManager()

    report = BulkImporter(model, show_progress=False).process_csv(csv_path)

    assert model.has_person(Person("Alex Yeoh"))
    assert "not found" in report["errors"][0]
