"""Relevance module."""

from .filter import GUID_FIELDS, NESTED_GUID_FIELDS, IRelevanceFilter, RelevanceFilter

__all__ = ["GUID_FIELDS", "NESTED_GUID_FIELDS", "IRelevanceFilter", "RelevanceFilter"]
