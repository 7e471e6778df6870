"""
OCSF Export Package
===================

Conversion of Amendment 13 assessment results into OCSF 1.6.0
Compliance Findings (2003) and Data Security Findings (2006).

Author: Tikun13 Team
Version: 1.0.0
"""

from .clock import Clock, FixedClock, SystemClock, UIDGenerator
from .exporter import OCSFExporter, render
from .mappings import (
    Severity,
    get_confidentiality_level,
    is_suspected_breach,
    map_impact,
    map_risk_level,
    map_severity,
    requires_dpo,
)
from .privacy import sanitize_answers

__all__ = [
    "OCSFExporter",
    "render",
    "Clock",
    "FixedClock",
    "SystemClock",
    "UIDGenerator",
    "Severity",
    "map_severity",
    "map_impact",
    "map_risk_level",
    "get_confidentiality_level",
    "is_suspected_breach",
    "requires_dpo",
    "sanitize_answers",
]
