"""Small, readable data structures and algorithms, with a small adding command."""

__version__ = "0.1.0"

__all__ = [
    "basics",
    "commandline",
    "complex_number",
    "counter",
    "dynarray",
    "fixed_array",
    "geometry",
    "hash_table",
    "linked_list",
    "quick_select",
    "records",
]