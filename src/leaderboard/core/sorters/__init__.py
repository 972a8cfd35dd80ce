"\"\"\"Sorter implementations for the leaderboard.\"\"\""

from .builtin import BuiltinSort
from .merge_sort import MergeSort
from .quick_sort import QuickSort

SORTERS = {
    "merge": MergeSort,
    "quick": QuickSort,
    "builtin": BuiltinSort,
}

__all__ = ["BuiltinSort", "MergeSort", "QuickSort", "SORTERS"]
