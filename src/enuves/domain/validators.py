"""Input validation shared by the directory services."""

from typing import Optional

from enuves.domain.entities import Nature
from enuves.domain.errors import (
    DESCRIPTION_REQUIRED,
    INVALID_NATURE,
    ValidationError,
    description_too_long,
    integration_code_too_long,
)

CATEGORY_DESCRIPTION_MAX = 50
ACCOUNT_DESCRIPTION_MAX = 100
INTEGRATION_CODE_MAX = 20


def validate_description(description: Optional[str], limit: int) -> str:
    """Return the stripped description, rejecting blank or over-long input."""
    cleaned = (description or "").strip()
    if not cleaned:
        raise ValidationError(DESCRIPTION_REQUIRED)
    if len(cleaned) > limit:
        raise ValidationError(description_too_long(limit))
    return cleaned


def normalize_integration_code(integration_code: Optional[str]) -> Optional[str]:
    """Blank integration codes are stored as None."""
    if integration_code is None:
        return None
    cleaned = integration_code.strip()
    if not cleaned:
        return None
    if len(cleaned) > INTEGRATION_CODE_MAX:
        raise ValidationError(integration_code_too_long(INTEGRATION_CODE_MAX))
    return cleaned


def coerce_nature(nature: Nature | str) -> Nature:
    if isinstance(nature, Nature):
        return nature
    try:
        return Nature(nature)
    except ValueError:
        raise ValidationError(INVALID_NATURE)
