"""Built-in fallback definitions used when no seed file is available."""
from __future__ import annotations

from typing import Iterator, Tuple

# Curated common technical terms. Words are already lowercase.
_FALLBACK_DEFINITIONS: Tuple[Tuple[str, str], ...] = (
    ("algorithm", "A step-by-step procedure for solving a problem."),
    ("api", "Application Programming Interface; protocols for building software."),
    ("array", "A data structure containing a collection of elements."),
    ("bank", "An institution for handling money; also, the land beside water."),
    ("boolean", "A data type with only two values: true or false."),
    ("buffer", "Temporary storage for data being transferred."),
    ("cache", "Storage for faster future data access."),
    ("class", "A blueprint for creating objects in OOP."),
    ("compiler", "A program that translates source code into machine code."),
    ("database", "An organized collection of structured data."),
    ("debug", "To find and fix errors in software."),
    ("function", "A reusable block of code that performs a task."),
    ("interpreter", "A program that executes instructions directly."),
    ("loop", "A construct that repeats a block of code."),
    ("memory", "Storage for data and instructions."),
    ("object", "An instance of a class with data and methods."),
    ("pointer", "A variable storing a memory address."),
    ("recursion", "A technique where a function calls itself."),
    ("string", "A sequence of characters representing text."),
    ("variable", "A named storage location for data."),
)


def iter_fallback_items() -> Iterator[Tuple[str, str]]:
    yield from _FALLBACK_DEFINITIONS


__all__ = ["iter_fallback_items"]
