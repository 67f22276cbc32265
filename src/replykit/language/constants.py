"""Marker tables for romanized Telugu ("Teluglish") detection.

Contains:
- The native script Unicode block
- Strong markers: a single whole-word hit is conclusive
- Weak markers: short, ambiguous tokens that only count in numbers
"""

from __future__ import annotations

from typing import Final


# =============================================================================
# Native Script
# =============================================================================

NATIVE_SCRIPT_START: Final[str] = "\u0c00"
NATIVE_SCRIPT_END: Final[str] = "\u0c7f"


# =============================================================================
# Romanized Markers
# =============================================================================

STRONG_ROMANIZED_MARKERS: Final[tuple[str, ...]] = (
    "naku", "nenu", "nuvvu", "enti", "cheppu", "undi", "ledu",
    "vachindi", "velli", "chestha", "chesthav", "chestharu",
    "antha", "antey", "kavali", "kadu", "avunu", "kaadu", "meeru",
    "vaadu", "aavidam", "evaru", "ekkada", "epudu", "endhuku",
    "bagundi", "baguntundi", "chala", "koncham", "inka", "aithe", "kani",
    "chesanu", "chesav", "chesadu", "chesindi", "velthunna", "vasthunna",
    "anna", "akka", "amma", "nanna", "thindi", "pani", "intiki", "bayatiki",
    "chesthunav", "chesthunnav", "veltunna", "vastunna", "ochadu", "ochindi",
)  # fmt: skip

WEAK_ROMANIZED_MARKERS: Final[tuple[str, ...]] = (
    "ela", "em", "ra", "naa", "nee", "mee",
)  # fmt: skip

WEAK_MARKER_THRESHOLD: Final[int] = 2
