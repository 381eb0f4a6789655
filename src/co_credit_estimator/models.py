"""
Input and result records for the credit estimator.

Enumerated fields are closed ``str`` enums whose values are the strings used
by the questionnaire (``"married-joint"``, ``"not-sure"``, ...), so records
round-trip through JSON and CSV without a translation table.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple


class FilingStatus(str, Enum):
    SINGLE = "single"
    HEAD_OF_HOUSEHOLD = "head-of-household"
    MARRIED_JOINT = "married-joint"
    MARRIED_SEPARATE = "married-separate"


class ColoradoResidency(str, Enum):
    FULL_YEAR = "full-year"
    PART_YEAR = "part-year"
    NO = "no"


class PayFrequency(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMI_MONTHLY = "semi-monthly"
    MONTHLY = "monthly"
    OTHER = "other"


class ChildRelationship(str, Enum):
    BIOLOGICAL = "biological"
    STEP = "step"
    FOSTER = "foster"
    ADOPTED = "adopted"
    OTHER = "other"


class Answer(str, Enum):
    """Tri-state answer to a yes/no question."""

    YES = "yes"
    NO = "no"
    NOT_SURE = "not-sure"


class CareWorkerType(str, Enum):
    CHILDCARE = "childcare"
    DIRECT_CARE = "direct-care"
    NONE = "none"


class EligibilityStatus(str, Enum):
    """Eligibility verdict, ordered from best to worst."""

    ELIGIBLE = "eligible"
    MAYBE = "maybe"
    INELIGIBLE = "ineligible"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    EligibilityStatus.ELIGIBLE: 0,
    EligibilityStatus.MAYBE: 1,
    EligibilityStatus.INELIGIBLE: 2,
}


def combine_status(
    current: EligibilityStatus, candidate: EligibilityStatus
) -> EligibilityStatus:
    """
    Merge a candidate verdict into the current one.

    Returns whichever of the two is worse, so a status can move from
    eligible to maybe to ineligible but never back.
    """
    return candidate if candidate.severity > current.severity else current


def round_half_up(value: float) -> int:
    """Round to the nearest whole dollar, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_dollars(amount: float, cents: bool = False) -> str:
    """
    Format an amount as ``$12,345``.

    Cents are shown when the amount has them, or always with ``cents=True``
    (``$12,345.00``).
    """
    if not cents and float(amount).is_integer():
        return f"${int(amount):,}"
    return f"${amount:,.2f}"


def pluralize_children(count: int) -> str:
    return "child" if count == 1 else "children"


@dataclass(frozen=True)
class ChildInfo:
    """A dependent as described by the filer."""

    age: int
    lives_with_you: Answer = Answer.YES
    relationship: ChildRelationship = ChildRelationship.BIOLOGICAL
    has_valid_id: Answer = Answer.YES

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChildInfo":
        """
        Build a child record from a mapping.

        Accepts snake_case keys or the questionnaire's camelCase keys
        (``livesWithYou``, ``hasValidID``).

        Raises:
            ValueError: If ``age`` is missing or an answer is not recognized.
        """
        age = _first(data, "age")
        if age is None:
            raise ValueError("Child record is missing 'age'")
        return cls(
            age=int(age),
            lives_with_you=Answer(
                _first(data, "lives_with_you", "livesWithYou", default="yes")
            ),
            relationship=ChildRelationship(
                _first(data, "relationship", default="biological")
            ),
            has_valid_id=Answer(
                _first(data, "has_valid_id", "hasValidID", default="yes")
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "age": self.age,
            "livesWithYou": self.lives_with_you.value,
            "relationship": self.relationship.value,
            "hasValidID": self.has_valid_id.value,
        }


@dataclass(frozen=True)
class TaxCreditInput:
    """
    Everything the credit calculators need to know about a household.

    ``has_child_care_expenses`` and ``child_care_expenses`` are collected by
    the questionnaire but no calculator consults them yet.
    """

    filing_status: FilingStatus
    colorado_resident: ColoradoResidency
    has_earned_income: bool
    annual_income: float
    children: Tuple[ChildInfo, ...] = ()
    has_child_care_expenses: bool = False
    child_care_expenses: float = 0
    is_care_worker: Optional[bool] = None
    care_worker_type: Optional[CareWorkerType] = None
    care_worker_hours: Optional[float] = None

    def __post_init__(self):
        if self.annual_income < 0:
            raise ValueError(
                f"annual_income must be non-negative, got {self.annual_income}"
            )
        # Lists are accepted for convenience but stored as a tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_colorado_resident(self) -> bool:
        return self.colorado_resident != ColoradoResidency.NO

    @property
    def is_part_year_resident(self) -> bool:
        return self.colorado_resident == ColoradoResidency.PART_YEAR

    @property
    def is_joint(self) -> bool:
        return self.filing_status == FilingStatus.MARRIED_JOINT

    def children_under(self, age: int) -> Tuple[ChildInfo, ...]:
        return tuple(c for c in self.children if c.age < age)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TaxCreditInput":
        """
        Build an input record from a mapping such as a parsed JSON object.

        Keys may be snake_case field names or the questionnaire's camelCase
        names (``filingStatus``, ``coloradoResident``, ``annualIncome``, ...).
        Amounts are sanitized with ``parse_amount``, so negative or
        unreadable figures become 0. Yes/no fields accept booleans or
        strings such as ``"false"`` and ``"yes"``.

        Raises:
            ValueError: If a required field is missing, an enumerated value
                is not recognized or a yes/no value can't be read.
        """
        # income imports this module
        from .income import parse_amount

        filing_status = _first(data, "filing_status", "filingStatus")
        resident = _first(data, "colorado_resident", "coloradoResident")
        if filing_status is None:
            raise ValueError("Input is missing 'filing_status'")
        if resident is None:
            raise ValueError("Input is missing 'colorado_resident'")

        care_type = _first(data, "care_worker_type", "careWorkerType")
        care_hours = _first(data, "care_worker_hours", "careWorkerHours")
        is_care_worker = _first(data, "is_care_worker", "isCareWorker")

        return cls(
            filing_status=FilingStatus(filing_status),
            colorado_resident=ColoradoResidency(resident),
            has_earned_income=to_bool(
                _first(data, "has_earned_income", "hasEarnedIncome", default=False),
                "has_earned_income",
            ),
            annual_income=parse_amount(_first(data, "annual_income", "annualIncome")),
            children=tuple(
                ChildInfo.from_dict(child)
                for child in _first(data, "children", default=()) or ()
            ),
            has_child_care_expenses=to_bool(
                _first(
                    data,
                    "has_child_care_expenses",
                    "hasChildCareExpenses",
                    default=False,
                ),
                "has_child_care_expenses",
            ),
            child_care_expenses=parse_amount(
                _first(data, "child_care_expenses", "childCareExpenses")
            ),
            is_care_worker=(
                None
                if is_care_worker is None
                else to_bool(is_care_worker, "is_care_worker")
            ),
            care_worker_type=None if care_type is None else CareWorkerType(care_type),
            care_worker_hours=None if care_hours is None else parse_amount(care_hours),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filingStatus": self.filing_status.value,
            "coloradoResident": self.colorado_resident.value,
            "hasEarnedIncome": self.has_earned_income,
            "annualIncome": self.annual_income,
            "children": [child.to_dict() for child in self.children],
            "hasChildCareExpenses": self.has_child_care_expenses,
            "childCareExpenses": self.child_care_expenses,
            "isCareWorker": self.is_care_worker,
            "careWorkerType": (
                self.care_worker_type.value if self.care_worker_type else None
            ),
            "careWorkerHours": self.care_worker_hours,
        }


@dataclass(frozen=True)
class CreditResult:
    """Outcome of a single credit calculation."""

    status: EligibilityStatus
    estimated_benefit: int
    explanation: str
    reasons: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.estimated_benefit < 0:
            raise ValueError(
                f"estimated_benefit must be non-negative, got {self.estimated_benefit}"
            )
        if not isinstance(self.reasons, tuple):
            object.__setattr__(self, "reasons", tuple(self.reasons))

    @property
    def is_eligible(self) -> bool:
        return self.status == EligibilityStatus.ELIGIBLE

    @classmethod
    def ineligible(cls, explanation: str, *reasons: str) -> "CreditResult":
        return cls(
            status=EligibilityStatus.INELIGIBLE,
            estimated_benefit=0,
            explanation=explanation,
            reasons=reasons,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "estimatedBenefit": self.estimated_benefit,
            "explanation": self.explanation,
            "reasons": list(self.reasons),
        }


# (attribute name, serialized key, display name)
CREDITS = (
    ("colorado_ctc", "coloradoCTC", "Colorado Child Tax Credit"),
    ("colorado_fatc", "coloradoFATC", "Colorado Family Affordability Tax Credit"),
    ("colorado_eitc", "coloradoEITC", "Colorado Earned Income Tax Credit"),
    ("colorado_care_worker", "coloradoCareWorker", "Colorado Care Worker Tax Credit"),
    ("federal_ctc", "federalCTC", "Federal Child Tax Credit"),
    ("federal_eitc", "federalEITC", "Federal Earned Income Tax Credit"),
)

CREDIT_NAMES = tuple(name for name, _, _ in CREDITS)


@dataclass(frozen=True)
class TaxCreditResults:
    """One result per credit plus the total of the eligible benefits."""

    colorado_ctc: CreditResult
    colorado_fatc: CreditResult
    colorado_eitc: CreditResult
    colorado_care_worker: CreditResult
    federal_ctc: CreditResult
    federal_eitc: CreditResult
    total_estimated_benefit: int = field(init=False)

    def __post_init__(self):
        total = sum(
            result.estimated_benefit for _, result in self.items() if result.is_eligible
        )
        object.__setattr__(self, "total_estimated_benefit", total)

    def items(self) -> Iterator[Tuple[str, CreditResult]]:
        """Iterate ``(credit name, result)`` pairs in display order."""
        for name in CREDIT_NAMES:
            yield name, getattr(self, name)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            key: getattr(self, name).to_dict() for name, key, _ in CREDITS
        }
        data["totalEstimatedBenefit"] = self.total_estimated_benefit
        return data


_TRUE_STRINGS = {"true", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "no", "n", "0", ""}


def to_bool(value: Any, key: str) -> bool:
    """
    Read a yes/no field from JSON or a table cell.

    Raises:
        ValueError: If a string is not a recognized yes/no spelling
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f"Cannot read '{value}' as a yes/no value for '{key}'")
    return bool(value)


def _first(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the value of the first key present in ``data``."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default
