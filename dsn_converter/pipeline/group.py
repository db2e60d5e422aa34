"""Group monthly declarations by organization."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from dsn_converter.common.models import MonthlyDeclaration


def group_by_organization(declarations: Iterable[MonthlyDeclaration]) -> dict[str, list[MonthlyDeclaration]]:
    """Partition declarations by organization key.

    Keys follow first appearance and each group keeps arrival order. Nothing is
    deduplicated here.
    """
    grouped: dict[str, list[MonthlyDeclaration]] = defaultdict(list)
    for declaration in declarations:
        grouped[declaration.organization_key].append(declaration)
    return dict(grouped)
