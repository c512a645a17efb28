"""
Set tables used while assembling the metadata bundle
"""

from typing import Dict, FrozenSet, List

# Arena set code => display name.
# Installed sets missing from here are reported as "Not added".
SET_NAMES: Dict[str, str] = {
    "ELD": "Throne of Eldraine",
    "M20": "Core Set 2020",
    "WAR": "War of the Spark",
    "RNA": "Ravnica Allegiance",
    "GRN": "Guilds of Ravnica",
    "G18": "M19 Gift Pack",
    "M19": "Core Set 2019",
    "DAR": "Dominaria",
    "RIX": "Rivals of Ixalan",
    "XLN": "Ixalan",
    "HOU": "Hour of Devastation",
    "AKH": "Amonkhet",
    "AER": "Aether Revolt",
    "KLD": "Kaladesh",
    "ANA": "Arena New Player Experience",
    "MI": "Mirage",
    "ArenaSUP": "Arena Supplemental",
}

# Published draft ratings, one spreadsheet page per set
RANKS_SHEETS: List[Dict[str, str]] = [
    {
        "setCode": "eld",
        "sheet": "1ZZKO2Bt6r2fXlIq2g6mR4GCfnl-6JxIt8X9k0ZzTbjI",
        "page": "ELD",
    },
    {
        "setCode": "m20",
        "sheet": "1BAPtQv4U9KUAtVzkccJlPS8cb0s_uOcGEDORip5uaQg",
        "page": "M20",
    },
    {
        "setCode": "war",
        "sheet": "1pk3a1YKGas-NI4ze_8hbwOtVRdYAbzCDIBS9MKjcQ7M",
        "page": "WAR",
    },
    {
        "setCode": "rna",
        "sheet": "1DfcITmtWaBHtiDYLYlHC1xJ_2VEEKB9uRkIOiNKaQWA",
        "page": "RNA",
    },
    {
        "setCode": "grn",
        "sheet": "1FPN3hgl6y_ePaDVbtZHMA7m5pgDnvJMJWqxO8xsUxH8",
        "page": "GRN",
    },
]

# Scryfall sets where only one art per card name is kept
NO_DUPES_ART_SETS: FrozenSet[str] = frozenset(
    {"pm20", "pana", "g18", "pgrn", "prna", "pwar", "peld"}
)

# Scryfall sets allowed into the card index, everything else is dropped
ALLOWED_SCRYFALL: FrozenSet[str] = frozenset(
    {
        "eld",
        "peld",
        "m20",
        "pm20",
        "war",
        "pwar",
        "rna",
        "prna",
        "grn",
        "pgrn",
        "g18",
        "m19",
        "pm19",
        "dom",
        "pdom",
        "rix",
        "prix",
        "xln",
        "pxln",
        "hou",
        "akh",
        "aer",
        "kld",
        "ana",
        "pana",
        "mir",
    }
)
