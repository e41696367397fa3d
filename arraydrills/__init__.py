"""Classic array, matrix and sorting exercises in brute-force, better and optimal forms."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "counting",
    "extremes",
    "matrix",
    "rearrange",
    "search",
    "setops",
    "sorting",
    "subarrays",
]