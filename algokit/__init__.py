"""String algorithms (KMP, Z-function, Manacher, tries, hashing) and combinatorics helpers."""

__version__ = "0.1.0"