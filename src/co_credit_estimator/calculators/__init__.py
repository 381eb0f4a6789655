"""
Credit calculators.

One module per credit, each exposing a parameter table and a pure
``calculate_*`` function returning a CreditResult. The qualifying child check
shared by the child-based credits lives in ``children``.
"""

from .care_worker import CARE_WORKER_PARAMS, calculate_care_worker_credit
from .children import ChildCheck, ChildTally, check_child, tally_children
from .colorado_ctc import COLORADO_CTC_PARAMS, calculate_colorado_ctc
from .colorado_eitc import COLORADO_EITC_PARAMS, calculate_colorado_eitc
from .colorado_fatc import FATC_PARAMS, calculate_colorado_fatc
from .federal_ctc import FEDERAL_CTC_PARAMS, calculate_federal_ctc
from .federal_eitc import FEDERAL_EITC_PARAMS, calculate_federal_eitc

__all__ = [
    "check_child",
    "tally_children",
    "ChildCheck",
    "ChildTally",
    "calculate_colorado_ctc",
    "COLORADO_CTC_PARAMS",
    "calculate_colorado_fatc",
    "FATC_PARAMS",
    "calculate_colorado_eitc",
    "COLORADO_EITC_PARAMS",
    "calculate_care_worker_credit",
    "CARE_WORKER_PARAMS",
    "calculate_federal_ctc",
    "FEDERAL_CTC_PARAMS",
    "calculate_federal_eitc",
    "FEDERAL_EITC_PARAMS",
]
