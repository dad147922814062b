"""Tests for the render_statement management command.

Run with: pytest tests/test_commands.py -v
"""

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


@pytest.fixture
def files(tmp_path, raw_invoice, plays):
    return (
        write_json(tmp_path / "invoices.json", [raw_invoice]),
        write_json(tmp_path / "plays.json", plays),
    )


def run(*args, **options) -> str:
    out = StringIO()
    call_command("render_statement", *args, stdout=out, **options)
    return out.getvalue()


class TestRenderStatementCommand:
    """Tests for the CLI harness."""

    def test_renders_text_by_default(self, files):
        """Each invoice in the list is rendered as plain text."""
        output = run(*files)
        assert output.startswith("Statement for BigCo\n")
        assert "Amount owed is $1,730.00\n" in output
        assert "You earned 47 credits\n" in output

    def test_renders_html(self, files):
        """--format html uses the HTML renderer."""
        output = run(*files, format="html")
        assert "<h1>Statement for BigCo</h1>" in output

    def test_renders_json(self, files):
        """--format json writes the serialized statement."""
        payload = json.loads(run(*files, format="json"))
        assert payload["totalAmount"] == 173000

    def test_accepts_single_invoice_object(self, tmp_path, raw_invoice, plays):
        """An invoices file may hold a single object."""
        output = run(
            write_json(tmp_path / "invoice.json", raw_invoice),
            write_json(tmp_path / "plays.json", plays),
        )
        assert "Statement for BigCo" in output

    def test_renders_every_invoice(self, tmp_path, raw_invoice, plays):
        """All invoices in the list are rendered in order."""
        second = {"customer": "Empty", "performances": []}
        output = run(
            write_json(tmp_path / "invoices.json", [raw_invoice, second]),
            write_json(tmp_path / "plays.json", plays),
        )
        assert output.index("Statement for BigCo") < output.index("Statement for Empty")

    def test_missing_category_is_command_error(self, tmp_path, raw_invoice, plays):
        """A play missing from the catalog is reported as a CommandError."""
        del plays["othello"]
        files = (
            write_json(tmp_path / "invoices.json", [raw_invoice]),
            write_json(tmp_path / "plays.json", plays),
        )
        with pytest.raises(CommandError, match="CATEGORY_NOT_FOUND"):
            run(*files)

    def test_unknown_kind_is_command_error(self, tmp_path, raw_invoice, plays):
        """An unknown play type is reported as a CommandError."""
        plays["hamlet"]["type"] = "musical"
        files = (
            write_json(tmp_path / "invoices.json", [raw_invoice]),
            write_json(tmp_path / "plays.json", plays),
        )
        with pytest.raises(CommandError, match="unknown type: musical"):
            run(*files)

    def test_invalid_payload_is_command_error(self, tmp_path, plays):
        """Malformed invoices are reported as a CommandError."""
        files = (
            write_json(tmp_path / "invoices.json", [{"performances": []}]),
            write_json(tmp_path / "plays.json", plays),
        )
        with pytest.raises(CommandError, match="Invalid input"):
            run(*files)

    def test_bad_json_is_command_error(self, tmp_path, plays):
        """A file that is not JSON is reported as a CommandError."""
        invoices = tmp_path / "invoices.json"
        invoices.write_text("{not json", encoding="utf-8")
        with pytest.raises(CommandError, match="not valid JSON"):
            run(str(invoices), write_json(tmp_path / "plays.json", plays))

    def test_missing_file_is_command_error(self, tmp_path, plays):
        """An unreadable file is reported as a CommandError."""
        with pytest.raises(CommandError, match="Cannot read"):
            run(str(tmp_path / "nope.json"), write_json(tmp_path / "plays.json", plays))
