"""Utility for resolving company names to IDs."""

from enuves.domain.company import CompanyService
from enuves.domain.errors import NotFoundError, company_not_found


def resolve_company(company_service: CompanyService, company: str | int) -> int:
    """Resolve company name or ID to company ID.

    Args:
        company_service: CompanyService instance
        company: Company name (str) or ID (int or string representation of int)

    Returns:
        Company ID

    Raises:
        NotFoundError: If company is not found
    """
    if isinstance(company, int):
        if company_service.get_company(company) is None:
            raise NotFoundError(company_not_found(company))
        return company

    try:
        company_id = int(company)
    except (ValueError, TypeError):
        # Not a number, treat as name
        pass
    else:
        if company_service.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))
        return company_id

    for existing in company_service.list_companies():
        if existing.name == company:
            return existing.id

    raise NotFoundError(company_not_found(company))
