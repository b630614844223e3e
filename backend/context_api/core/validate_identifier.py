"""Identifier Validation — accepts or rejects category, context and item ids.

Invariants:
    - is_valid never raises; None, empty and whitespace-only ids are invalid
    - require_valid_identifier raises InvalidIdentifierError before any lookup
"""

import re

from context_api.core.domain_types import IdentifierField
from context_api.core.errors import InvalidIdentifierError
from context_api.core.service_protocols import IdentifierValidator

MAX_IDENTIFIER_LENGTH = 64
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")


class RequestParamValidator:
    """Default IdentifierValidator: short tokens of letters, digits, '.', '_' and '-',
    starting with a letter or digit (so "." and ".." never reach a URL path)."""

    def is_valid(self, identifier: str | None) -> bool:
        if identifier is None or not identifier.strip():
            return False
        if len(identifier) > MAX_IDENTIFIER_LENGTH:
            return False
        return _IDENTIFIER_PATTERN.fullmatch(identifier) is not None


def require_valid_identifier(
    validator: IdentifierValidator, identifier: str | None,
    field: IdentifierField,
) -> str:
    """Return identifier unchanged, or raise InvalidIdentifierError."""
    if not validator.is_valid(identifier):
        raise InvalidIdentifierError(field, identifier)
    return identifier
