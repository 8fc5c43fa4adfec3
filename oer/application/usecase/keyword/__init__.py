"""Keyword use cases."""

from .delete_keywords import DeleteAllKeywordsResponse, DeleteAllKeywordsUseCase
from .list_keywords import ListKeywordsResponse, ListKeywordsUseCase
from .save_keyword import SaveKeywordRequest, SaveKeywordResponse, SaveKeywordUseCase

__all__ = [
    "DeleteAllKeywordsResponse",
    "DeleteAllKeywordsUseCase",
    "ListKeywordsResponse",
    "ListKeywordsUseCase",
    "SaveKeywordRequest",
    "SaveKeywordResponse",
    "SaveKeywordUseCase",
]
