"""
Swagger doc verification — is the checked-in file up to date?

Steps run in a fixed order and the first failure ends the run:

1. completeness check (fatal only when comments are enforced)
2. read the baseline file
3. regenerate from the same records
4. byte-compare

Nothing is written; a stale baseline is reported, not repaired.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from swaggerdocs.adapters.base import DocRenderer, SourceFormatter
from swaggerdocs.core.errors import MissingDocsError, ReadError, StaleError
from swaggerdocs.core.models.records import CompletenessReport, DocumentationRecord
from swaggerdocs.core.services.completeness import check_docs_exist
from swaggerdocs.core.services.generators.swagger_doc import generate_swagger_docs

logger = logging.getLogger(__name__)


def verify_swagger_docs(
    package_name: str,
    file_path: str | Path,
    records: Sequence[DocumentationRecord],
    enforce_comments: bool,
    renderer: DocRenderer | None = None,
    formatter: SourceFormatter | None = None,
) -> CompletenessReport:
    """Verify that ``file_path`` holds exactly what would be generated.

    Returns the completeness report, so callers need not check twice.

    Raises:
        MissingDocsError: Descriptions are missing and ``enforce_comments`` is set.
        ReadError: The baseline file cannot be read.
        RenderError: Propagated from generation.
        FormatError: Propagated from generation.
        StaleError: The baseline differs from the generated content.
    """
    report = check_docs_exist(records)
    if report.count > 0:
        if enforce_comments:
            raise MissingDocsError(report.count, report.listing, report=report)
        logger.warning(
            "Existing swagger docs are missing %d entries:\n%s",
            report.count, report.listing,
        )

    path = Path(file_path)
    try:
        existing = path.read_bytes()
    except OSError as e:
        raise ReadError(str(path), e.strerror or str(e)) from e

    generated = generate_swagger_docs(
        package_name, report.records, renderer=renderer, formatter=formatter,
    )

    if existing != generated:
        raise StaleError(str(path))

    logger.info("Swagger docs up to date: %s", path)
    return report
