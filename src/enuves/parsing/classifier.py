"""Category and account matching for parsed statement descriptions."""

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence, TypeVar

from enuves.domain.entities import Account, Category


class _Described(Protocol):
    id: int
    description: str


EntryT = TypeVar("EntryT", bound=_Described)


@dataclass(frozen=True)
class Classification:
    """Directory matches for one statement line. Either side may be unresolved."""

    category_id: Optional[int] = None
    account_id: Optional[int] = None


def rank_by_specificity(entries: Iterable[EntryT]) -> list[EntryT]:
    """Order entries longest description first, keeping directory order among ties."""
    return sorted(entries, key=lambda entry: len(entry.description), reverse=True)


def find_contained(text: str, ranked_entries: Sequence[EntryT]) -> Optional[EntryT]:
    """Return the first entry whose description occurs in ``text``, ignoring case."""
    normalized = text.upper()
    for entry in ranked_entries:
        candidate = entry.description.strip().upper()
        if not candidate:
            continue
        if candidate in normalized or candidate == normalized:
            return entry
    return None


class StatementClassifier:
    """Matches descriptions and account suffixes against one company's directories.

    Built once per parse from freshly fetched directories; holds no state
    beyond them.
    """

    def __init__(self, categories: Iterable[Category], accounts: Iterable[Account]):
        self.categories = rank_by_specificity(categories)
        self.accounts = rank_by_specificity(accounts)
        self._category_names = {c.id: c.description for c in self.categories}
        self._account_names = {a.id: a.description for a in self.accounts}

    def match_category(self, description: str) -> Optional[Category]:
        return find_contained(description, self.categories)

    def match_account(self, suffix: str) -> Optional[Account]:
        return find_contained(suffix, self.accounts)

    def classify(self, description: str, suffix: Optional[str] = None) -> Classification:
        """Resolve a category from the description and, when given, an account from the suffix."""
        category = self.match_category(description)
        account = self.match_account(suffix) if suffix is not None else None
        return Classification(
            category_id=category.id if category else None,
            account_id=account.id if account else None,
        )

    def category_name(self, category_id: Optional[int]) -> Optional[str]:
        return self._category_names.get(category_id)

    def account_name(self, account_id: Optional[int]) -> Optional[str]:
        return self._account_names.get(account_id)


def classify(
    description: str,
    suffix: Optional[str],
    categories: Iterable[Category],
    accounts: Iterable[Account],
) -> Classification:
    """Classify a single description/suffix pair against the given directories."""
    return StatementClassifier(categories, accounts).classify(description, suffix)
