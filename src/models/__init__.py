"""
Data models for brand matching.

This module contains pure data classes with no business logic.
"""

from .brand import MatchResult, Product, RelationRecord

__all__ = ['RelationRecord', 'Product', 'MatchResult']
