"""
Configuration module for LHC Calculator.

This module provides:
- Pydantic settings model
- YAML settings and scenario loading
- Regulatory constants and resolvers (MLS, LHC loading)
"""

from lhc_calculator.config.models import CalculatorSettings
from lhc_calculator.config.loader import ConfigurationError, load_scenarios, load_settings

__all__ = [
    "CalculatorSettings",
    "ConfigurationError",
    "load_scenarios",
    "load_settings",
]
