from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class TaxonomyEntry:
    category: str
    keywords: Tuple[str, ...]


@dataclass(frozen=True)
class TaxonomyTable:
    """Ordered keyword rules; the first entry with a matching keyword wins.

    `default` is returned when nothing matches. A table whose default is None
    reports "no category" for unmatched text.
    """

    name: str
    entries: Tuple[TaxonomyEntry, ...]
    default: Optional[str] = None

    @property
    def categories(self) -> Tuple[str, ...]:
        """Distinct categories in declaration order, default last if not declared."""
        out = []
        for entry in self.entries:
            if entry.category not in out:
                out.append(entry.category)
        if self.default is not None and self.default not in out:
            out.append(self.default)
        return tuple(out)


def make_table(name: str, rules, default: Optional[str] = None) -> TaxonomyTable:
    entries = tuple(TaxonomyEntry(category, tuple(keywords)) for category, keywords in rules)
    return TaxonomyTable(name=name, entries=entries, default=default)


# ---------------- Free-text taxonomies ----------------
DISPOSAL_TAXONOMY = make_table(
    "who_dispose",
    [
        (
            "Nearby Households",
            [
                "nearby household",
                "house hol",
                "households",
                "colony people",
                "banglow wale log",
                "जवळ पास",
                "सोसायटी",
            ],
        ),
        ("Vendors / Small Stalls", ["vendor", "stall", "shop", "chai wale", "market wale", "street vendor"]),
        ("People from Outside", ["outside", "बाहेरून", "पर्यटक", "outsider", "visitor"]),
        ("Passing Crowd / Vehicle People", ["गाडी", "जाण्या येणाऱ्या", "ऑटो", "vehicle", "passing"]),
        (
            "Households and Vendors Mixed",
            [
                "households , people from outside , street vendors",
                "vendor and households",
                "people and households",
                "mixed",
            ],
        ),
        ("Construction Waste", ["construction", "repair", "काम", "बांधकाम"]),
        ("Showrooms / Commercial Establishments", ["showroom", "commercial"]),
        ("Public Parks / Institutions", ["उद्यान", "park", "public area", "lake", "ambazari"]),
        ("Citizens / General Public", ["citizens", "people", "public"]),
        ("Unknown / Not Mentioned", ["unknown", "माहित नाही", "n", "all", "dont know"]),
        (
            "Nearby + Outside Combined",
            [
                "nearby households and people from outside",
                "जवळ पास लोकांनी टाकतात आणि बाहेरून येणारे पण",
            ],
        ),
        ("Market / Vendor Community", ["market", "vendors", "stall"]),
    ],
    default="Unknown / Not Mentioned",
)

SETTING_TAXONOMY = make_table(
    "setting",
    [
        ("Residential Area", ["residential", "colony", "house", "society"]),
        ("Nallah / Drain", ["nallah", "drain"]),
        ("Market / Commercial Area", ["market_place", "market", "bazaar", "shop"]),
        ("Playground / Open Space", ["playground", "ground", "sports", "field"]),
        ("School / Institution", ["school", "college", "institution"]),
        ("Open Plot / Vacant Land", ["open_plot", "vacant", "empty plot"]),
        (
            "Roadside / Footpath / Public Path",
            [
                "road",
                "roadside",
                "road side",
                "footpath",
                "corner",
                "square",
                "front side",
                "temple",
                "collector office",
                "near sadar",
                "sem",
            ],
        ),
        ("Water Body / Lake Area", ["lake", "water", "pond", "नदी", "लेक"]),
        ("Other / Miscellaneous", ["other", "unknown", "misc"]),
    ],
    default="Other / Miscellaneous",
)

# Category names (typo and trailing spaces included) are shown as-is in the charts.
SOLUTION_TAXONOMY = make_table(
    "solution",
    [
        (
            "Bins and Facilites",
            [
                "Dust bin at Roadside",
                "Should Punishment Fee",
                "More Bins",
                "Bins",
                "More bins",
                "More Bins Awareness Among People",
                "Dustbins",
                "Add a board ",
                "Say to Use Of Dustbin",
                "Add Dustbin",
                " Bins Too",
                " Dustbins and Strictly Fine",
                "Bins and Facilities and strict fines",
                "Increasing of Dustbin",
            ],
        ),
        (
            "Technology-Enabled Monitoring",
            [
                "Fine and Surveillance Camera at that Place",
                "Surveillance Camera at that Place",
                "install camera on street.",
                "Should Camera Surveillance",
            ],
        ),
        (
            "Strict Enforcement Measures ",
            ["Strict Fines", "strictly fine for people", "Strictly Fine", "strict fines", "and strictly fine for people"],
        ),
        (
            "Public Awareness & Education ",
            ["Awareness Program", "Awareness Among People", "More Bins Awareness Among People"],
        ),
        ("Sanitization Vehicle Roster", ["Should Regular Visit of Cleaner Vans"]),
        ("Regulatory & Administrative Support", ["the NMC vehicle should collect this garbage from here ."]),
        (
            "Efficient Waste Collection System",
            [
                "Proper schedule for collection vehicle",
                "The Place Need to be get cleaned from the road side on daily basis.",
            ],
        ),
        ("Neutral Feedback", ["Nothing"]),
    ],
    default=None,
)


# ---------------- Flag columns (label -> record column) ----------------
WASTE_TYPE_COLUMNS: Dict[str, str] = {
    "Organic & Wet": "Organic and Wet Waste",
    "Plastic Paper": "Plastic Paper Glass Waste",
    "Sanitary & Hazardous": "Sanitary and Hazardous Waste",
    "Battery & Bulb": "Battery and Bulb Waste",
    "Construction & Demolition": "Construction and Demolition Waste",
    "Clothes": "Clothes Waste",
    "Carcasses": "Carcasses Waste",
    "Others": "Others",
}

PROBLEM_COLUMNS: Dict[str, str] = {
    "Bad Odour": "Bad Odour",
    "Mosquitos": "Mosquitos",
    "Stray Animals": "Stray Animals",
    "Congestion": "Congestion",
    "Other": "Other",
}

REASON_COLUMNS: Dict[str, str] = {
    "No Regular Collection Vehicle": "No Regular Collection Vehicle",
    "Random People Throwing Garbage": "Random People Throwing Garbage",
    "Due To User Fee": "Due To User Fee",
    "Mismatch of Vehicle Time": "Mismatch of Vehicle Time",
    "Due to Narrow Road": "Due to Narrow Road",
    "Because of Market and Street Vendors": "Because of Market and Street Vendors",
}


# ---------------- Free-text columns ----------------
WHO_DISPOSE_COLUMN = "Who Dispose"
# First non-empty value wins.
SETTING_COLUMNS: Tuple[str, ...] = ("In_what_setting_is_the_GVP_pre", "Location Type", "other")
SOLUTION_COLUMNS: Tuple[str, ...] = (
    "Solution Suggested by Interviewee1",
    "Solution Suggested by Interviewee2",
    "Solution Suggested by Interviewee3",
)
