"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class PersistenceError(DomainError):
    """The record store rejected an operation for a reason other than a conflict."""


def company_not_found(company: int | str) -> str:
    """Return message for missing company."""
    return f"Empresa '{company}' não encontrada"


def company_name_taken(name: str) -> str:
    return f"Já existe uma empresa com o nome '{name}'"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Categoria {category_id} não encontrada"


def account_not_found(account_id: int) -> str:
    """Return message for missing account by ID."""
    return f"Conta {account_id} não encontrada"


def transaction_not_found(transaction_id: int) -> str:
    return f"Lançamento {transaction_id} não encontrado"


def code_band_exhausted(nature: str) -> str:
    """Return message when a nature's code band has no free codes left."""
    return f"Limite de códigos atingido para a natureza {nature}."


def duplicate_category_code() -> str:
    return "Já existe uma categoria com este código."


def account_code_race() -> str:
    return "Erro de concorrência ao gerar código. Tente novamente."


def category_delete_blocked(category_id: int, transaction_count: int) -> str:
    """Return message when a category still has transactions."""
    plural = "lançamentos" if transaction_count != 1 else "lançamento"
    return (
        f"Não é possível excluir a categoria {category_id}: ela possui "
        f"{transaction_count} {plural}. Reclassifique ou exclua-os primeiro."
    )


def description_too_long(limit: int) -> str:
    return f"A descrição deve ter no máximo {limit} caracteres"


def integration_code_too_long(limit: int) -> str:
    return f"O código de integração deve ter no máximo {limit} caracteres"


COMPANY_NAME_REQUIRED = "Nome da empresa é obrigatório"
DESCRIPTION_REQUIRED = "Descrição é obrigatória"
INVALID_NATURE = "Natureza inválida"
CATEGORY_REQUIRED = "Todo lançamento precisa de uma categoria"

CREATE_CATEGORY_FAILED = "Erro ao criar categoria"
UPDATE_CATEGORY_FAILED = "Erro ao atualizar categoria"
DELETE_CATEGORY_FAILED = "Erro ao excluir categoria"
SEED_CATEGORIES_FAILED = "Erro ao inserir padrões"
CREATE_ACCOUNT_FAILED = "Erro ao criar conta"
UPDATE_ACCOUNT_FAILED = "Erro ao atualizar conta"
DELETE_ACCOUNT_FAILED = "Erro ao excluir conta"
UPDATE_TRANSACTION_FAILED = "Erro ao atualizar lançamento"
DELETE_TRANSACTION_FAILED = "Erro ao excluir lançamento"
SAVE_TRANSACTIONS_FAILED = "Erro ao salvar lançamentos"
EXPORT_FAILED = "Erro ao gerar arquivo de exportação"


def pdf_processing_failed(reason: str) -> str:
    return f"Erro ao processar o arquivo PDF: {reason}"


def export_blocked(missing_labels: list[str], limit: int = 5) -> str:
    """Return message listing directory entries that lack integration codes."""
    shown = missing_labels[:limit]
    remaining = len(missing_labels) - limit
    message = (
        "Exportação bloqueada! As seguintes categorias/contas não possuem "
        f"Código de Integração: {', '.join(shown)}"
    )
    if remaining > 0:
        message += f" e mais {remaining} itens."
    message += " Por favor, adicione os códigos de integração antes de exportar."
    return message


def invalid_candidate(reason: str) -> str:
    return f"Lançamento inválido: {reason}"
