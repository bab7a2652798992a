"""
Domain models — Pydantic types for swagger doc generation.

All models are re-exported here for convenient access:

    from swaggerdocs.core.models import DocumentationRecord, FieldDoc, SwaggerDocsConfig
"""

from swaggerdocs.core.models.config import PackageTarget, SwaggerDocsConfig
from swaggerdocs.core.models.records import (
    CompletenessReport,
    DocumentationRecord,
    FieldDoc,
    MissingDoc,
)
from swaggerdocs.core.models.template import GeneratedFile

__all__ = [
    # records.py
    "CompletenessReport",
    "DocumentationRecord",
    "FieldDoc",
    # template.py
    "GeneratedFile",
    "MissingDoc",
    # config.py
    "PackageTarget",
    "SwaggerDocsConfig",
]
