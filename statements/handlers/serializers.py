"""Serializers for parsing raw invoice/play payloads and shaping statement output.

Input serializers accept the ``invoices.json`` / ``plays.json`` shapes and
build domain models. Output serializers turn ``StatementData`` into
primitives for the JSON renderer.
"""

from collections.abc import Mapping
from typing import Any

from rest_framework import serializers

from statements.domain import Invoice, Performance
from statements.stores import InMemoryCategoryCatalog


class PerformanceInputSerializer(serializers.Serializer):
    """A performance entry: ``{"playID": "hamlet", "audience": 55}``."""

    playID = serializers.CharField(trim_whitespace=False)
    audience = serializers.IntegerField(min_value=0)

    def create(self, validated_data: dict[str, Any]) -> Performance:
        return Performance(
            category_id=validated_data["playID"],
            audience=validated_data["audience"],
        )


class InvoiceInputSerializer(serializers.Serializer):
    """An invoice entry with its customer and ordered performances."""

    customer = serializers.CharField(trim_whitespace=False, allow_blank=True)
    performances = PerformanceInputSerializer(many=True, allow_empty=True)

    def create(self, validated_data: dict[str, Any]) -> Invoice:
        return Invoice(
            customer_name=validated_data["customer"],
            performances=tuple(
                PerformanceInputSerializer().create(perf)
                for perf in validated_data["performances"]
            ),
        )


class CategoryInputSerializer(serializers.Serializer):
    """A play entry: ``{"name": "Hamlet", "type": "tragedy"}``.

    ``type`` is left unchecked here; unknown kinds fail when priced.
    """

    name = serializers.CharField()
    type = serializers.CharField()


def parse_invoice(raw: Any) -> Invoice:
    """Validate a raw invoice payload and build an Invoice.

    Raises:
        ValidationError: If the payload does not match the invoice shape.
    """
    serializer = InvoiceInputSerializer(data=raw)
    serializer.is_valid(raise_exception=True)
    return serializer.save()


def parse_catalog(raw: Mapping[str, Any]) -> InMemoryCategoryCatalog:
    """Validate a raw plays payload and build a catalog.

    Raises:
        ValidationError: If the payload does not match the plays shape.
    """
    field = serializers.DictField(child=CategoryInputSerializer())
    return InMemoryCategoryCatalog.from_dict(field.run_validation(raw))


class EnrichedPerformanceSerializer(serializers.Serializer):
    """Serializer for EnrichedPerformance domain model."""

    playID = serializers.CharField(source="category_id")
    play = serializers.CharField(source="category.name")
    type = serializers.CharField(source="category.kind")
    audience = serializers.IntegerField()
    amount = serializers.IntegerField()
    volumeCredits = serializers.IntegerField(source="volume_credits")


class StatementDataSerializer(serializers.Serializer):
    """Serializer for StatementData domain model."""

    customer = serializers.CharField(source="customer_name")
    performances = EnrichedPerformanceSerializer(many=True)
    totalAmount = serializers.IntegerField(source="total_amount")
    totalVolumeCredits = serializers.IntegerField(source="total_volume_credits")
