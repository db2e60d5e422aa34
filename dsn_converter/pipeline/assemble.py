"""Monthly declaration assembly."""

from __future__ import annotations

from dsn_converter.common.models import ExtractedFields, MonthlyDeclaration
from dsn_converter.pipeline.extract import format_period_key


def organization_key(fields: ExtractedFields) -> str:
    return fields.establishment_id + fields.activity_code


def assemble_declaration(
    header: str,
    separator: str,
    record: str,
    fields: ExtractedFields,
    source: str | None = None,
) -> MonthlyDeclaration:
    return MonthlyDeclaration(
        organization_key=organization_key(fields),
        period_key=format_period_key(fields.pay_period),
        content=header + separator + record,
        source=source,
    )
