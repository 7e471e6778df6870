"""
Tikun13 Shared Schemas Package
==============================

Data contracts on both sides of the exporter.

This package provides:
    - AssessmentResult, Violation, Recommendation: input from the scoring engine
    - ComplianceFinding, DataSecurityFinding: OCSF findings
    - OCSFDocument, CombinedReport: exported documents

Author: Tikun13 Team
Version: 1.0.0
"""

from shared.schemas.assessment import (
    AssessmentResult,
    Recommendation,
    RiskLevel,
    Violation,
)

from shared.schemas.ocsf import (
    CombinedReport,
    ComplianceFinding,
    DataSecurityFinding,
    OCSFDocument,
    OCSFRecommendation,
    Product,
    ReportSummary,
)

__all__ = [
    # Input schema
    "AssessmentResult",
    "Recommendation",
    "RiskLevel",
    "Violation",
    # Output schema
    "CombinedReport",
    "ComplianceFinding",
    "DataSecurityFinding",
    "OCSFDocument",
    "OCSFRecommendation",
    "Product",
    "ReportSummary",
]
