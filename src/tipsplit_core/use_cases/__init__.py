"""
Use Cases Layer

Aggregates calculation logic into use cases called from the runner and viewer.
"""

from tipsplit_core.use_cases.preset_comparison import compare_presets

__all__ = [
    "compare_presets",
]
