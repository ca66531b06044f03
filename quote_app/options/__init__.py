"""Options chain table projection"""

from .projector import distinct_expirations, next_sort_spec, project

__all__ = ["project", "distinct_expirations", "next_sort_spec"]
