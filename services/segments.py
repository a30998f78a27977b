"""
Segment Catalog
===============
Single source of truth for sales segments.
Imported by the ledger, the export and the tracker view.

The catalog is fixed for the life of the process. Display attributes
(emoji, colour) are presentation metadata and are kept apart from the
model so the total formula never depends on them.
"""

from models.ledger import Segment

# Canonical catalog, in display order
SEGMENTS = (
    Segment("Air Bank"),
    Segment("Postpaid"),
    Segment("IND"),
    Segment("TV"),
    Segment("Campra"),
    Segment("HW"),
    Segment("ICO", exclude_from_total=True),
    Segment("Zbytek"),
)

# Just the names for validation
SEGMENT_NAMES = [s.name for s in SEGMENTS]

# Names that count toward consultant and store totals
COUNTED_SEGMENT_NAMES = frozenset(s.name for s in SEGMENTS if not s.exclude_from_total)

# Name -> emoji for table headers
SEGMENT_EMOJI = {
    "Air Bank": "🏛️",
    "Postpaid": "📞",
    "IND": "🌐",
    "TV": "📺",
    "Campra": "📈",
    "HW": "📱",
    "ICO": "💼",
    "Zbytek": "🗑️",
}

# Name -> accent colour (hex) for table headers
SEGMENT_COLORS = {
    "Air Bank": "#22c55e",
    "Postpaid": "#3b82f6",
    "IND": "#a855f7",
    "TV": "#f97316",
    "Campra": "#eab308",
    "HW": "#6b7280",
    "ICO": "#ef4444",
    "Zbytek": "#000000",
}


def is_known_segment(name: str) -> bool:
    """Check if name belongs to the fixed catalog."""
    return name in SEGMENT_NAMES


def get_segment_label(name: str) -> str:
    """Header label: emoji followed by the segment name."""
    emoji = SEGMENT_EMOJI.get(name)
    return f"{emoji} {name}" if emoji else name


def empty_entries() -> dict:
    """Fresh entries mapping with every catalog segment at 0."""
    return {name: 0 for name in SEGMENT_NAMES}
