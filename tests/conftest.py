"""Shared fixtures for estimator tests."""

import logging

import pytest

from co_credit_estimator.models import (
    Answer,
    ChildInfo,
    ChildRelationship,
    ColoradoResidency,
    FilingStatus,
    TaxCreditInput,
)


def child(
    age,
    lives=Answer.YES,
    relationship=ChildRelationship.BIOLOGICAL,
    valid_id=Answer.YES,
):
    """Build a ChildInfo; defaults describe a fully qualifying child."""
    return ChildInfo(
        age=age,
        lives_with_you=lives,
        relationship=relationship,
        has_valid_id=valid_id,
    )


def household(**overrides):
    """Build a TaxCreditInput: single, full-year resident, $50,000, no children."""
    values = dict(
        filing_status=FilingStatus.SINGLE,
        colorado_resident=ColoradoResidency.FULL_YEAR,
        has_earned_income=True,
        annual_income=50000,
        children=(),
    )
    values.update(overrides)
    return TaxCreditInput(**values)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo logging setup done by CLI entry points during a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def make_child():
    return child


@pytest.fixture
def make_household():
    return household
