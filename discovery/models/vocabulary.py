"""
Closed vocabularies for worker profiles and search criteria.

Values match what the onboarding forms write to the record store. Lookup is
case-insensitive: JobType("waiter") is JobType.WAITER.
"""

from enum import Enum
from typing import Any, List, Optional, Type, TypeVar

V = TypeVar("V", bound="Vocabulary")


class Vocabulary(str, Enum):
    """str Enum with case-insensitive, whitespace-tolerant lookup."""

    @classmethod
    def _missing_(cls, value: Any):
        if isinstance(value, str):
            key = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == key:
                    return member
        return None

    @classmethod
    def values(cls) -> List[str]:
        return [m.value for m in cls]


class JobType(Vocabulary):
    WAITER = "Waiter"
    COOK = "Cook"
    CASHIER = "Cashier"
    MANAGER = "Manager"
    HOUSEKEEPER = "Housekeeper"
    GARDENER = "Gardener"
    POOL_GUY = "Pool guy"
    BARTENDER = "Bartender"
    SELLER = "Seller"


class WorkArea(Vocabulary):
    SEMINYAK = "Seminyak"
    KUTA = "Kuta"
    KEROBOKAN = "Kerobokan"
    CANGGU = "Canggu"
    UMALAS = "Umalas"
    UBUD = "Ubud"
    ULUWATU = "Uluwatu"
    DENPASAR = "Denpasar"
    SANUR = "Sanur"
    JIMBARAN = "Jimbaran"
    PERERENAN = "Pererenan"
    NUSA_DUA = "Nusa Dua"


class Language(Vocabulary):
    ENGLISH = "English"
    BAHASA = "Bahasa"


class Gender(Vocabulary):
    MALE = "male"
    FEMALE = "female"


class ContractType(Vocabulary):
    PART_TIME = "part_time"
    FULL_TIME = "full_time"


def parse_term(vocabulary: Type[V], value: Any) -> Optional[V]:
    """
    Parse one optional vocabulary term.

    None and blank strings mean "unset". Anything else must be a member,
    otherwise ValueError names the field's allowed values.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return vocabulary(value)
    except ValueError:
        raise ValueError(
            f"{value!r} is not a valid {vocabulary.__name__} (allowed: {', '.join(vocabulary.values())})"
        ) from None


def parse_terms(vocabulary: Type[V], values: Any) -> List[V]:
    """Parse a list of vocabulary terms, dropping duplicates but keeping order."""
    if values is None:
        return []
    if not isinstance(values, (list, tuple, set, frozenset)):
        raise ValueError(f"expected a list of {vocabulary.__name__}, got {type(values).__name__}")
    out: List[V] = []
    for value in values:
        term = parse_term(vocabulary, value)
        if term is not None and term not in out:
            out.append(term)
    return out
