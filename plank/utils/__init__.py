from plank.utils.pagination import DEFAULT_LIMIT, Paginator

__all__ = ["DEFAULT_LIMIT", "Paginator"]
