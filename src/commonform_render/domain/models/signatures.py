"""Signature page models for the block appended after a .docx form."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SignatureEntity(BaseModel):
    """An entity signing through a representative (``by`` line)."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str
    form: Optional[str] = None
    jurisdiction: Optional[str] = None
    by: Optional[str] = Field(None, description="Role of the signer, e.g. 'Chief Executive Officer'")


class SignaturePage(BaseModel):
    """One party's signature page."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    header: Optional[str] = None
    term: Optional[str] = Field(None, description="Defined term for the party, e.g. 'Landlord'")
    name: Optional[str] = None
    title: Optional[str] = None
    entities: list[SignatureEntity] = Field(default_factory=list)
    information: list[str] = Field(
        default_factory=list,
        description="Extra labelled lines below the signature, e.g. 'date', 'email'",
    )
    same_page: bool = Field(False, alias="samePage")


class SignatureBlock(BaseModel):
    """All signature pages, in order."""

    pages: list[SignaturePage] = Field(default_factory=list)
