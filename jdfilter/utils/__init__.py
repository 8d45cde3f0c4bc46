from jdfilter.utils.text_utils import (
    clean_text,
    is_non_empty,
    pick_first,
    unique_in_order,
    join_text_sources,
)

__all__ = [
    "clean_text",
    "is_non_empty",
    "pick_first",
    "unique_in_order",
    "join_text_sources",
]
