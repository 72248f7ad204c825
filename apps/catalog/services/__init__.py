from .global_search import GlobalSearchService

__all__ = ['GlobalSearchService']
