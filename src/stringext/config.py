"""
Library configuration and defaults.

All defaults and tuning knobs are centralized here.
"""

__all__ = ["CONFIG"]

from typing import Any, Dict

# ====================================================================
# LIBRARY CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Key-value parsing defaults
    "default_delimiter": ";",  # Separates one pair from the next
    "default_separator": "=",  # Separates a key from its value
    # Character counting
    "vector_enabled": True,  # Master switch for the numpy counting path
    "vector_width": 16,  # Characters compared per chunk (lanes)
    "vector_min_length": 64,  # Shorter texts are counted with the scalar loop
}
