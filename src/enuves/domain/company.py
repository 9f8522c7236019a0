"""Company domain service."""

from typing import Optional

from enuves.database.base import Database
from enuves.domain.entities import Company as CompanyEntity
from enuves.domain.errors import (
    COMPANY_NAME_REQUIRED,
    ConflictError,
    NotFoundError,
    ValidationError,
    company_name_taken,
    company_not_found,
)


class CompanyService:
    """Service for managing client companies."""

    def __init__(self, db: Database):
        """Initialize company service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_company(self, name: str, cnpj: Optional[str] = None) -> int:
        """Create a new company.

        Args:
            name: Company name, unique across the installation
            cnpj: Optional CNPJ (tax id)

        Returns:
            Company ID

        Raises:
            ValidationError: If the name is blank
            ConflictError: If company name already exists
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError(COMPANY_NAME_REQUIRED)
        for company in self.db.list_companies():
            if company.name == name:
                raise ConflictError(company_name_taken(name))

        try:
            return self.db.create_company(name=name, cnpj=(cnpj or "").strip() or None)
        except ConflictError as e:
            raise ConflictError(company_name_taken(name)) from e

    def get_company(self, company_id: int) -> Optional[CompanyEntity]:
        """Get company by ID."""
        return self.db.get_company(company_id)

    def require_company(self, company_id: int) -> CompanyEntity:
        """Get company by ID or raise NotFoundError."""
        company = self.db.get_company(company_id)
        if company is None:
            raise NotFoundError(company_not_found(company_id))
        return company

    def list_companies(self) -> list[CompanyEntity]:
        """List all companies."""
        return self.db.list_companies()
