"""Category domain service."""

from typing import Optional

import structlog

from enuves.database.base import Database
from enuves.domain.entities import Category as CategoryEntity, Nature
from enuves.domain.errors import (
    CREATE_CATEGORY_FAILED,
    DELETE_CATEGORY_FAILED,
    SEED_CATEGORIES_FAILED,
    UPDATE_CATEGORY_FAILED,
    ConflictError,
    DependencyError,
    NotFoundError,
    PersistenceError,
    ValidationError,
    category_delete_blocked,
    category_not_found,
    code_band_exhausted,
    company_not_found,
    duplicate_category_code,
)
from enuves.domain.validators import (
    CATEGORY_DESCRIPTION_MAX,
    coerce_nature,
    normalize_integration_code,
    validate_description,
)

logger = structlog.get_logger()

DEFAULT_CATEGORIES: dict[Nature, list[str]] = {
    Nature.SAIDA: [
        "ABSF", "Alarme", "App Enuvens", "Benificiência", "Brindes", "Cartão de crédito",
        "Contabilidade", "DARF", "ENERGIA ELETRICA", "Equipamentos Eletrônicos",
        "INSS Contribuição aposentadoria pastoral", "Instrumentos Musicais", "Internet",
        "IRPF Imposto de renda", "IRRF Imposto de renda da poupança", "Lanches", "Light",
        "Manutenção e Conservação", "Ministério da Fazenda Darf", "Ministério de Ensino",
        "Ministério de Eventos Festas no Geral", "Ministerio Familia", "Missões Mundiais",
        "Missões Nacionais", "Plano Cooperativo", "SAAE", "Secretaria IBVM", "Serviços Bancarios",
        "Serviços Ceia", "SERVIÇOS ESSENCIAS", "Serviços Estaduais", "Supermercado",
        "Sustento Ministro de Música", "Sustento Pastoral", "Tarifa Bancaria Extratos",
        "Tarifas cobradas pelo banco", "Xerox", "Acerto de Caixa", "Beneficência",
        "Ajuda para famílias da igreja ou pessoas necessitadas", "Cantina", "Construção",
        "Ofertas para Reformas e construção da igreja", "Deposito Avulso", "Dízimo", "Juros",
        "Oferta Missionária", "Ofertas Alçadas", "Reembolso de despesas",
    ],
    Nature.ENTRADA: [],
    Nature.TRANSFERENCIA: [],
}


class CategoryService:
    """Service for managing a company's categories and their code bands."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_company(self, company_id: int) -> None:
        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))

    def list_categories(self, company_id: int) -> list[CategoryEntity]:
        """List a company's categories ordered by code."""
        return self.db.list_categories(company_id)

    def get_category(self, category_id: int) -> Optional[CategoryEntity]:
        """Get category by ID."""
        return self.db.get_category(category_id)

    def next_code(self, company_id: int, nature: Nature | str) -> str:
        """Return the code the next category of ``nature`` would receive.

        Codes are allocated as the highest code in the nature's band plus one,
        starting at the bottom of the band.

        Raises:
            ValidationError: If the nature is unknown or its band is exhausted
        """
        nature = coerce_nature(nature)
        min_code, max_code = nature.code_band
        current = self.db.get_max_category_code(company_id, min_code, max_code)
        next_code = min_code if current is None else current + 1
        if next_code > max_code:
            raise ValidationError(code_band_exhausted(nature.value))
        return str(next_code)

    def create_category(
        self,
        company_id: int,
        description: str,
        nature: Nature | str,
        integration_code: Optional[str] = None,
    ) -> int:
        """Create a category with the next free code of its nature's band.

        Two concurrent creations can pick the same code; the loser gets a
        ConflictError asking to try again.

        Returns:
            Category ID

        Raises:
            ValidationError: On invalid input or an exhausted code band
            NotFoundError: If the company doesn't exist
            ConflictError: If the allocated code was taken concurrently
        """
        nature = coerce_nature(nature)
        description = validate_description(description, CATEGORY_DESCRIPTION_MAX)
        integration_code = normalize_integration_code(integration_code)
        self._require_company(company_id)

        code = self.next_code(company_id, nature)
        try:
            category_id = self.db.create_category(
                company_id=company_id,
                code=code,
                description=description,
                nature=nature.value,
                integration_code=integration_code,
            )
        except ConflictError as e:
            raise ConflictError(duplicate_category_code()) from e
        except PersistenceError as e:
            logger.exception("category_create_failed", company_id=company_id, code=code)
            raise PersistenceError(CREATE_CATEGORY_FAILED) from e

        logger.info("category_created", company_id=company_id, category_id=category_id, code=code)
        return category_id

    def update_category(
        self, category_id: int, description: str, integration_code: Optional[str] = None
    ) -> None:
        """Update a category's description and integration code.

        Code and nature are fixed once assigned.
        """
        description = validate_description(description, CATEGORY_DESCRIPTION_MAX)
        integration_code = normalize_integration_code(integration_code)
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        try:
            self.db.update_category(category_id, description, integration_code)
        except PersistenceError as e:
            logger.exception("category_update_failed", category_id=category_id)
            raise PersistenceError(UPDATE_CATEGORY_FAILED) from e

    def delete_category(self, category_id: int) -> None:
        """Delete a category that no transaction references.

        Raises:
            NotFoundError: If the category doesn't exist
            DependencyError: If transactions still use the category
        """
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        transaction_count = self.db.get_category_transaction_count(category_id)
        if transaction_count > 0:
            raise DependencyError(category_delete_blocked(category_id, transaction_count))

        try:
            self.db.delete_category(category_id)
        except PersistenceError as e:
            logger.exception("category_delete_failed", category_id=category_id)
            raise PersistenceError(DELETE_CATEGORY_FAILED) from e

    def seed_default_categories(self, company_id: int, nature: Nature | str = Nature.ENTRADA) -> int:
        """Insert the built-in categories of a nature that the company lacks.

        Returns:
            Number of categories inserted (0 when the default list is empty)
        """
        nature = coerce_nature(nature)
        self._require_company(company_id)

        existing = {c.description for c in self.db.list_categories(company_id)}
        missing = [d for d in DEFAULT_CATEGORIES[nature] if d not in existing]
        if not missing:
            return 0

        _, max_code = nature.code_band
        first_code = int(self.next_code(company_id, nature))
        if first_code + len(missing) - 1 > max_code:
            raise ValidationError(code_band_exhausted(nature.value))

        rows = [
            (str(first_code + offset), description, nature.value)
            for offset, description in enumerate(missing)
        ]
        try:
            count = self.db.create_categories(company_id, rows)
        except ConflictError as e:
            raise ConflictError(duplicate_category_code()) from e
        except PersistenceError as e:
            logger.exception("category_seed_failed", company_id=company_id, nature=nature.value)
            raise PersistenceError(SEED_CATEGORIES_FAILED) from e

        logger.info("categories_seeded", company_id=company_id, nature=nature.value, count=count)
        return count
