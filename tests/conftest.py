"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from swaggerdocs.core.models.records import DocumentationRecord, FieldDoc


@pytest.fixture
def pod_records() -> list[DocumentationRecord]:
    """Two fully documented types."""
    return [
        DocumentationRecord(
            type_name="Pod",
            doc="Pod is a collection of containers.",
            fields=(
                FieldDoc(name="spec", doc="desired state"),
                FieldDoc(name="status", doc="observed state"),
            ),
        ),
        DocumentationRecord(
            type_name="PodList",
            doc="PodList is a list of Pods.",
            fields=(FieldDoc(name="items", doc="items is the list of Pods"),),
        ),
    ]


@pytest.fixture
def undocumented_records() -> list[DocumentationRecord]:
    """A type with one documented and one undocumented field."""
    return [
        DocumentationRecord(
            type_name="Widget",
            doc="Widget is a thing.",
            fields=(
                FieldDoc(name="size", doc="size in cm"),
                FieldDoc(name="color"),
            ),
        ),
    ]


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A swaggerdocs.yml with two packages, returning the config path."""
    (tmp_path / "api" / "v1").mkdir(parents=True)
    (tmp_path / "api" / "v2").mkdir(parents=True)

    (tmp_path / "swaggerdocs.yml").write_text(textwrap.dedent("""\
        version: 1
        enforce_comments: false
        packages:
          - name: v1
            path: api/v1
          - name: v2
            path: api/v2
    """))
    (tmp_path / "api" / "v1" / "docs.yml").write_text(textwrap.dedent("""\
        types:
          - name: Pod
            doc: Pod is a collection of containers.
            fields:
              - name: spec
                doc: desired state
              - name: status
                doc: observed state
    """))
    (tmp_path / "api" / "v2" / "docs.yml").write_text(textwrap.dedent("""\
        types:
          - name: Widget
            doc: Widget is a thing.
            fields:
              - name: size
                doc: size in cm
              - name: color
    """))
    return tmp_path / "swaggerdocs.yml"
