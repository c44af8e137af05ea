"""
Analysis property models.

This package provides the Pydantic data models for the key/value
properties that a provisioning step hands to downstream analysis steps.
"""

from .models import AnalysisProperties, Property

__all__ = [
    "AnalysisProperties",
    "Property",
]
