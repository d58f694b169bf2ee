from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

# Canonical output columns. Order and literal header text are what downstream
# consumers of ELIGIBLE.csv read.
CANONICAL_COLUMNS: Tuple[str, ...] = (
    "Institution Name",
    "UnitID",
    "GENERAL ELIGIBILITY",
    "year",
    "datafile",
    "sheet",
)

INSTITUTION_NAME = "Institution Name"
UNIT_ID = "UnitID"
GENERAL_ELIGIBILITY = "GENERAL ELIGIBILITY"

# Provenance columns stamped by the tagger.
PROVENANCE_COLUMNS: Tuple[str, ...] = ("year", "datafile", "sheet")

# Known header typo in some releases (HSI sheets, possibly others).
HEADER_SPELLING_FIXES: Dict[str, str] = {
    "GENERAL ELIGIBLITY": GENERAL_ELIGIBILITY,
}

SOURCE_FILES: Tuple[str, ...] = ("eligibilitymatrix", "mseipeligibility")
SOURCE_BASE_URL = "https://www2.ed.gov/about/offices/list/ope/idues/"
EXCLUDED_SHEETS: Tuple[str, ...] = ("Program Interactions",)


class SheetCategory(Enum):
    STATUTORY_LIST = "statutory_list"
    GENERIC_ELIGIBILITY = "generic_eligibility"
    UNSUPPORTED = "unsupported"


# Statutory lists, in the order they lead the combined output.
STATUTORY_SHEETS: Tuple[str, ...] = ("HBCU", "TCCU")

GENERIC_SHEETS: Tuple[str, ...] = (
    "AANAPISI",
    "ANNH",
    "HSI",
    "NASNTI",
    "PBI",
    "SIP",
    "MSEIP",
)

SHEET_CATEGORIES: Dict[str, SheetCategory] = {
    **{name: SheetCategory.STATUTORY_LIST for name in STATUTORY_SHEETS},
    **{name: SheetCategory.GENERIC_ELIGIBILITY for name in GENERIC_SHEETS},
}

# Presence-indicator column labels per statutory sheet, compared ignoring
# whitespace. HBCU uses a two-line header cell.
STATUTORY_INDICATOR_LABELS: Dict[str, Tuple[str, ...]] = {
    "HBCU": ("HBCU/\r\nHBGI",),
    "TCCU": ("TCCU List",),
}

# Observed values of GENERAL ELIGIBILITY on generic sheets. FCS = Federal Cost-Share.
ELIGIBILITY_VOCABULARY: Tuple[str, ...] = (
    "Yes",
    "No",
    "Eligible, Exemption Request Approved",
    "Eligible, Application Approved",
    "Eligible, via IPEDS data",
    "Ineligible, but Receives FCS Waiver",
    "Ineligible, Exemption Request Denied",
    "Not Eligible",
)
