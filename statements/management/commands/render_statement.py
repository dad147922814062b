"""Render statements for invoices read from JSON files."""

import json
from pathlib import Path
from typing import Any

from django.core.management.base import BaseCommand, CommandError
from rest_framework.exceptions import ValidationError

from statements.domain import DomainError
from statements.handlers import RENDERERS
from statements.handlers.serializers import parse_catalog, parse_invoice
from statements.services import StatementService


class Command(BaseCommand):
    help = "Render a statement for each invoice in INVOICES using the plays in PLAYS."

    def add_arguments(self, parser) -> None:
        parser.add_argument("invoices", type=Path, help="JSON file with one invoice or a list")
        parser.add_argument("plays", type=Path, help="JSON file mapping play IDs to plays")
        parser.add_argument(
            "--format",
            choices=sorted(RENDERERS),
            default="text",
            help="Output format (default: text)",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        raw_invoices = self._load_json(options["invoices"])
        raw_plays = self._load_json(options["plays"])
        if isinstance(raw_invoices, dict):
            raw_invoices = [raw_invoices]
        if not isinstance(raw_invoices, list):
            raise CommandError("Invoices file must hold an invoice object or a list of them")

        render = RENDERERS[options["format"]]
        try:
            service = StatementService(parse_catalog(raw_plays))
            for raw_invoice in raw_invoices:
                data = service.create_statement_data(parse_invoice(raw_invoice))
                self.stdout.write(render(data), ending="")
        except ValidationError as exc:
            raise CommandError(f"Invalid input: {exc.detail}") from exc
        except DomainError as exc:
            raise CommandError(str(exc)) from exc

    def _load_json(self, path: Path) -> Any:
        try:
            with path.open(encoding="utf-8") as fh:
                return json.load(fh)
        except OSError as exc:
            raise CommandError(f"Cannot read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CommandError(f"{path} is not valid JSON: {exc}") from exc
