"""
Pharmacy Brand Matching

Modules:
    models      - Data models (RelationRecord, Product, MatchResult)
    common      - Shared utilities (config loader, logging, CSV and text helpers)
    brands      - Brand equivalence classes and title-based brand assignment
"""
