"""
Documentation records — the per-type description tables.

A record is one Go type plus the ordered description of each of its
fields. Records are frozen: the completeness check and the generator
both read them, neither mutates them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FieldDoc(BaseModel):
    """One field's description.

    Exempt fields are skipped by the completeness check. They are still
    rendered when they carry a description.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    doc: str = ""
    exempt: bool = False

    @property
    def documented(self) -> bool:
        return bool(self.doc.strip())


class DocumentationRecord(BaseModel):
    """One type and its field descriptions.

    ``doc`` is the type's own description; it renders under the empty
    key, ahead of the fields.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type_name: str = Field(alias="name")
    doc: str = ""
    fields: tuple[FieldDoc, ...] = ()

    def entries(self) -> list[tuple[str, str]]:
        """(key, doc) pairs in render order, type doc first under ``""``."""
        pairs = [("", self.doc)]
        pairs.extend((f.name, f.doc) for f in self.fields)
        return pairs


class MissingDoc(BaseModel):
    """A type or field without a description."""

    model_config = ConfigDict(frozen=True)

    type_name: str
    field_name: str = ""

    @property
    def is_type(self) -> bool:
        return self.field_name == ""

    def describe(self) -> str:
        if self.is_type:
            return f"Missing documentation for the struct itself: {self.type_name}"
        return (
            f"In struct: {self.type_name}, "
            f"field documentation is missing: {self.field_name}"
        )


class CompletenessReport(BaseModel):
    """Outcome of the completeness check.

    Carries the records it checked so callers can feed exactly those
    into generation.
    """

    model_config = ConfigDict(frozen=True)

    records: tuple[DocumentationRecord, ...] = ()
    missing: tuple[MissingDoc, ...] = ()

    @property
    def count(self) -> int:
        return len(self.missing)

    @property
    def listing(self) -> str:
        return "".join(m.describe() + "\n" for m in self.missing)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "missing": [
                {"type": m.type_name, "field": m.field_name} for m in self.missing
            ],
        }
