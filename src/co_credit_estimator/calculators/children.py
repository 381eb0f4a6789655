"""
Qualifying child check shared by the child-based credits.

A child is checked on three tests, in order: residency, relationship and
taxpayer ID. Each test can only push the verdict toward ineligible.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ..models import (
    Answer,
    ChildInfo,
    ChildRelationship,
    EligibilityStatus,
    combine_status,
)

ISSUES = {
    "lives_no": "Child does not live with you more than half the year",
    "lives_not_sure": "Unclear if child lives with you more than half the year",
    "relationship_other": "Relationship may not qualify - verify with tax professional",
    "id_no": "Child does not have valid SSN/TIN",
    "id_not_sure": "Unclear if child has valid SSN/TIN",
}


@dataclass(frozen=True)
class ChildCheck:
    """Verdict for one child."""

    status: EligibilityStatus
    issues: Tuple[str, ...]

    @property
    def is_qualifying(self) -> bool:
        return self.status == EligibilityStatus.ELIGIBLE


def check_child(child: ChildInfo) -> ChildCheck:
    """
    Decide whether a child counts toward a credit.

    Args:
        child: The child as described by the filer

    Returns:
        ChildCheck with the merged verdict and the issues found
    """
    status = EligibilityStatus.ELIGIBLE
    issues: List[str] = []

    if child.lives_with_you == Answer.NO:
        issues.append(ISSUES["lives_no"])
        status = combine_status(status, EligibilityStatus.INELIGIBLE)
    elif child.lives_with_you == Answer.NOT_SURE:
        issues.append(ISSUES["lives_not_sure"])
        status = combine_status(status, EligibilityStatus.MAYBE)

    if child.relationship == ChildRelationship.OTHER:
        issues.append(ISSUES["relationship_other"])
        status = combine_status(status, EligibilityStatus.MAYBE)

    if child.has_valid_id == Answer.NO:
        issues.append(ISSUES["id_no"])
        status = combine_status(status, EligibilityStatus.INELIGIBLE)
    elif child.has_valid_id == Answer.NOT_SURE:
        issues.append(ISSUES["id_not_sure"])
        status = combine_status(status, EligibilityStatus.MAYBE)

    return ChildCheck(status=status, issues=tuple(issues))


@dataclass
class ChildTally:
    """Running totals over a group of children."""

    qualifying: List[ChildInfo] = field(default_factory=list)
    status: EligibilityStatus = EligibilityStatus.ELIGIBLE
    issues: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.qualifying)

    @property
    def none_qualify(self) -> bool:
        """True when no child qualifies and at least one was disqualified."""
        return self.count == 0 and self.status == EligibilityStatus.INELIGIBLE


def tally_children(children: Iterable[ChildInfo]) -> ChildTally:
    """
    Check each child and merge the verdicts.

    Every non-qualifying child lowers the overall status to its own verdict
    and contributes its issues.
    """
    tally = ChildTally()
    for child in children:
        check = check_child(child)
        if check.is_qualifying:
            tally.qualifying.append(child)
        else:
            tally.status = combine_status(tally.status, check.status)
            tally.issues.extend(check.issues)
    return tally
