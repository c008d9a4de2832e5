# tests/test_cli.py

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from connectify.cli.main import connectify
from connectify.core.storage import load


@pytest.fixture
def runner():
    return CliRunner()


def _book_path():
    # Default prefs point at data/connectify.json, relative to the working directory.
    return Path("data") / "connectify.json"


def test_list_people_seeds_sample_data(runner):
    """Test that the first run seeds sample data and lists the people."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["list", "--entity", "people"])

        assert result.exit_code == 0, result.output
        assert "Alex Yeoh" in result.output
        assert "Showing 4 entries in 'people'" in result.output


def test_list_all_shows_companies_and_people(runner):
    """Test that 'list' shows companies first, then people."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["list"])

        assert result.exit_code == 0, result.output
        assert "Showing 6 entries in 'all'" in result.output
        assert result.output.index("Google") < result.output.index("Bernice Yu")


def test_add_person_is_saved(runner):
    """Test that an added person is written to the data file."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["add-person", "-n", "Roy Balakrishnan", "-p", "92624417",
                                            "-t", "colleagues"])
        assert result.exit_code == 0, result.output
        assert "New person added" in result.output

        names = [p.name for p in load(_book_path()).get_person_list()]
        assert names[-1] == "Roy Balakrishnan"


def test_add_duplicate_company_fails(runner):
    """Test that adding an existing company exits with an error."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["add-company", "-n", "Google"])
        assert result.exit_code == 1
        assert "already exists" in result.output


def test_delete_person_and_invalid_index(runner):
    """Test deleting by index, then an out-of-range index."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["delete-person", "1"])
        assert result.exit_code == 0, result.output
        assert "Deleted person: Alex Yeoh" in result.output

        result = runner.invoke(connectify, ["delete-person", "99"])
        assert result.exit_code == 1
        assert "invalid" in result.output


def test_note_adds_and_removes_note(runner):
    """Test adding a note and removing it with an empty one."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["note", "2", "--note", "Prefers email"])
        assert result.exit_code == 0, result.output
        assert load(_book_path()).get_person_list()[1].note == "Prefers email"

        result = runner.invoke(connectify, ["note", "2"])
        assert "Removed note" in result.output
        assert load(_book_path()).get_person_list()[1].note == ""


def test_find_people(runner):
    """Test a name search across several keywords."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["find-people", "bernice", "david"])
        assert result.exit_code == 0, result.output
        assert "2 people found" in result.output
        assert "Alex Yeoh" not in result.output


def test_import_csv(runner):
    """Test a CSV import through the CLI."""
    with runner.isolated_filesystem():
        with open("contacts.csv", "w", encoding="utf-8") as f:
            f.write("type,name,industry\ncompany,Shopee,Ecommerce\n")

        result = runner.invoke(connectify, ["import", "contacts.csv"])

        assert result.exit_code == 0, result.output
        assert "Import Summary" in result.output
        companies = [c.name for c in load(_book_path()).get_company_list()]
        assert "Shopee" in companies


def test_corrupt_config_fails_cleanly(runner):
    """Test that an unreadable config exits with status 1."""
    with runner.isolated_filesystem():
        with open("config.json", "w", encoding="utf-8") as f:
            f.write("{ nope")
        result = runner.invoke(connectify, ["list"])
        assert result.exit_code == 1


def test_config_option_is_created(runner):
    """Test that --config creates the named config file."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["--config", "custom.json", "list"])
        assert result.exit_code == 0, result.output
        with open("custom.json", encoding="utf-8") as f:
            assert json.load(f)["log_level"] == "INFO"


def test_find_people_by_tag(runner):
    """Test that find-people --by tag searches tags instead of names."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["find-people", "--by", "tag", "neighbours"])
        assert result.exit_code == 0, result.output
        assert "1 people found" in result.output
        assert "Charlotte Oliveiro" in result.output


def test_find_companies_rejects_unknown_search_field(runner):
    """Test that find-companies only accepts the fields it can search."""
    with runner.isolated_filesystem():
        result = runner.invoke(connectify, ["find-companies", "--by", "website", "google"])
        assert result.exit_code == 2
        assert "Invalid value for '--by'" in result.output


def test_unreadable_data_file_starts_empty(runner):
    """Test that a data file with wrongly typed fields does not crash the CLI."""
    with runner.isolated_filesystem():
        _book_path().parent.mkdir()
        _book_path().write_text(json.dumps({"persons": [{"name": "Bob", "phone": 91234567}]}))

        result = runner.invoke(connectify, ["list"])

        assert result.exit_code == 0, result.output
        assert "Showing 0 entries in 'all'" in result.output
