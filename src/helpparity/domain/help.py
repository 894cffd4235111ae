"""Help records produced by documentation adapters.

The models keep documentation exactly as authored. Emptiness, placeholder
text and type-name whitespace are judged by the consistency checker, not here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RelatedLink(BaseModel):
    """Navigation reference from a help record."""

    model_config = {"frozen": True}

    text: str = Field(default="", description="Link text")
    uri: str = Field(default="", description="Navigation target")

    @property
    def has_target(self) -> bool:
        return bool(self.uri.strip())


class ParameterDoc(BaseModel):
    """Documentation entry for a single parameter."""

    model_config = {"frozen": True}

    name: str
    text: str = Field(default="", description="Parameter prose")
    required: str = Field(default="", description="String-rendered boolean ('true'/'false')")
    declared_type: str | None = Field(
        default=None,
        description="Declared type as authored, surrounding whitespace preserved",
    )


class HelpRecord(BaseModel):
    """Documentation for one command."""

    model_config = {"frozen": True}

    command_name: str
    synopsis: str = ""
    description: str = ""
    related_links: list[RelatedLink] = Field(default_factory=list)
    parameter_docs: dict[str, ParameterDoc] = Field(default_factory=dict)

    def find_parameter(self, name: str) -> ParameterDoc | None:
        """Case-insensitive lookup of a parameter's documentation entry."""
        doc = self.parameter_docs.get(name)
        if doc is not None:
            return doc
        key = name.casefold()
        for doc_name, doc in self.parameter_docs.items():
            if doc_name.casefold() == key:
                return doc
        return None
