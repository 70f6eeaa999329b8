"""Analyzer model classes."""

from analyzer.model.country import Country

__all__ = ['Country']
