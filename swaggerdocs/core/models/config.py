"""
Config model — the contents of swaggerdocs.yml.

Declares which Go packages carry swagger docs, where their
documentation tables live, and the policy applied when verifying.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_OUTPUT_FILE_NAME = "zz_generated.swagger_doc_generated.go"
DEFAULT_DOCS_FILE_NAME = "docs.yml"


class PackageTarget(BaseModel):
    """A Go package whose swagger docs are generated.

    ``path`` is relative to the config file; ``docs`` and ``output`` are
    relative to ``path``.
    """

    name: str
    path: str
    docs: str = DEFAULT_DOCS_FILE_NAME
    output: str = DEFAULT_OUTPUT_FILE_NAME

    @property
    def docs_path(self) -> str:
        return f"{self.path}/{self.docs}"

    @property
    def output_path(self) -> str:
        return f"{self.path}/{self.output}"


class SwaggerDocsConfig(BaseModel):
    """Root configuration — loaded from swaggerdocs.yml."""

    version: int = 1

    enforce_comments: bool = False
    formatter: Literal["builtin", "gofmt"] = "builtin"
    gofmt_binary: str = "gofmt"

    packages: list[PackageTarget] = Field(default_factory=list)

    def get_package(self, path: str) -> PackageTarget | None:
        """Look up a package target by path, falling back to name."""
        for pkg in self.packages:
            if pkg.path == path:
                return pkg
        for pkg in self.packages:
            if pkg.name == path:
                return pkg
        return None
