"""
Completeness check — find types and fields without a description.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from swaggerdocs.core.models.records import (
    CompletenessReport,
    DocumentationRecord,
    MissingDoc,
)

logger = logging.getLogger(__name__)


def check_docs_exist(records: Iterable[DocumentationRecord]) -> CompletenessReport:
    """Report every type and non-exempt field whose description is empty.

    A type missing its own description counts once; each undocumented
    field counts once more. Records are returned untouched in the report
    so generation can run on exactly what was checked.
    """
    checked = tuple(records)
    missing: list[MissingDoc] = []

    for record in checked:
        if not record.doc.strip():
            missing.append(MissingDoc(type_name=record.type_name))
        for field in record.fields:
            if field.exempt or field.documented:
                continue
            missing.append(MissingDoc(type_name=record.type_name, field_name=field.name))

    logger.debug("Checked %d type(s), %d missing doc(s)", len(checked), len(missing))
    return CompletenessReport(records=checked, missing=tuple(missing))
