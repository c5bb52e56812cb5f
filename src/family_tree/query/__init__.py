from .mrca import find_mrca_name, most_recent_common_ancestor

__all__ = [
    "find_mrca_name",
    "most_recent_common_ancestor",
]
