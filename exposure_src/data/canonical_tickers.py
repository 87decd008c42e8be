"""
Default alias -> canonical ticker table.

Share classes of the same company that must be reported as one row.
The list is manually curated; override with EXPOSURE_CANONICAL_MAP_PATH.
"""

from typing import Dict

DEFAULT_CANONICAL_MAP: Dict[str, str] = {
    "GOOG": "GOOGL",  # Alphabet class C -> class A
    "BRK.A": "BRK.B",  # Berkshire class A -> class B
}
