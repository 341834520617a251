"""Signature page generator.

Turns the ``signatures`` front-matter entry into a ``SignatureBlock`` the
.docx renderer appends after the form body. The entry is either a single
page mapping or a list of them::

    signatures:
      - header: The parties are signing this agreement on the dates below.
        term: Landlord
        entities:
          - name: Acme Properties LLC
            form: limited liability company
            jurisdiction: Delaware
            by: Manager
        information: [date, email]
      - term: Tenant
        samePage: true
"""

from __future__ import annotations

from typing import Any, Mapping

from commonform_render.domain.models.signatures import SignatureBlock, SignaturePage


def signature_pages(spec: Any) -> SignatureBlock:
    """Validate *spec* and return the signature block.

    Raises:
        TypeError: If *spec* is neither a mapping nor a list.
        pydantic.ValidationError: If a page has unknown or mistyped fields.
    """
    if isinstance(spec, Mapping):
        raw_pages = [spec]
    elif isinstance(spec, (list, tuple)):
        raw_pages = list(spec)
    else:
        raise TypeError("Signatures must be a page or a list of pages.")

    pages = [SignaturePage.model_validate(page) for page in raw_pages]
    return SignatureBlock(pages=pages)
