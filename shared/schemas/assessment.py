"""
Assessment Input Schemas
========================

Input contract for the OCSF exporter: the assessment result produced by
the questionnaire scoring engine.

Malformed optional values are coerced to their defaults instead of
failing validation; a partially filled questionnaire still exports.

Usage:
    from shared.schemas.assessment import AssessmentResult

    result = AssessmentResult.model_validate({
        "score": 62,
        "riskLevel": {"label": "גבוה"},
        "violations": [...],
        "totalFines": 150000,
        "recommendations": [...],
    })

Author: Tikun13 Team
Version: 1.0.0
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


logger = logging.getLogger(__name__)


def _as_number(value: Any) -> Optional[Union[int, float]]:
    """Return value if it is a usable number, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            number = float(value.replace(",", "").strip())
        except ValueError:
            return None
        return int(number) if number.is_integer() else number
    return None


def _as_text(value: Any) -> Optional[str]:
    """Stringify scalars, drop anything else."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _entries_as(items: Any, model: Type[BaseModel], kind: str) -> List[Any]:
    """
    Keep the mapping and model entries of a sequence.

    Instances of ``model`` pass through; other pydantic models and
    read-only mappings are copied into plain dicts.
    """
    if not isinstance(items, (list, tuple)):
        if items is not None:
            logger.warning(f"Ignoring non-sequence {kind}: {type(items).__name__}")
        return []
    kept = []
    for item in items:
        if isinstance(item, model):
            kept.append(item)
        elif isinstance(item, BaseModel):
            kept.append(item.model_dump())
        elif isinstance(item, Mapping):
            kept.append(dict(item))
    if len(kept) != len(items):
        logger.warning(f"Dropped {len(items) - len(kept)} malformed {kind} entries")
    return kept


class RiskLevel(BaseModel):
    """Risk level computed by the scoring engine (localized label)."""
    model_config = ConfigDict(extra="allow")

    label: Optional[str] = Field(None, description="Localized risk label, e.g. 'גבוה'")

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, v: Any) -> Optional[str]:
        return _as_text(v)


class Violation(BaseModel):
    """
    One failed compliance check.

    Unknown keys are kept so that they travel with the violation into
    ``unmapped.violation_details``.
    """
    model_config = ConfigDict(extra="allow")

    description: str = Field(default="", description="Human-readable violation text")
    category: str = Field(default="", description="Violation category, e.g. 'consent'")
    severity: str = Field(default="", description="critical, high, medium, low or info")
    law_reference: Optional[str] = Field(None, description="Statutory section reference")
    fine: Optional[Union[int, float]] = Field(None, description="Potential fine in ILS")

    @field_validator("description", "category", "severity", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return _as_text(v) or ""

    @field_validator("law_reference", mode="before")
    @classmethod
    def coerce_reference(cls, v: Any) -> Optional[str]:
        return _as_text(v)

    @field_validator("fine", mode="before")
    @classmethod
    def coerce_fine(cls, v: Any) -> Optional[Union[int, float]]:
        return _as_number(v)


class Recommendation(BaseModel):
    """Remediation recommendation produced by the scoring engine."""
    model_config = ConfigDict(extra="allow")

    priority: Optional[str] = Field(None, description="Priority label")
    category: Optional[str] = Field(None, description="Violation category it addresses")
    action: Optional[str] = Field(None, description="Short action statement")
    description: Optional[str] = Field(None, description="Detailed guidance")
    timeline: Optional[str] = Field(None, description="Suggested time frame")
    reference: Optional[str] = Field(None, description="Statutory reference")

    @field_validator(
        "priority", "category", "action", "description", "timeline", "reference",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return _as_text(v)


class AssessmentResult(BaseModel):
    """
    Result of scoring one questionnaire.

    Field names follow the scoring engine's camelCase wire format
    (``riskLevel``, ``totalFines``, ``complianceMatrix``); snake_case
    names are accepted as well.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    score: Optional[Union[int, float]] = Field(None, description="Compliance score")
    risk_level: Optional[RiskLevel] = Field(None, alias="riskLevel")
    violations: List[Violation] = Field(default_factory=list)
    total_fines: Optional[Union[int, float]] = Field(None, alias="totalFines")
    recommendations: List[Recommendation] = Field(default_factory=list)
    compliance_matrix: Any = Field(None, alias="complianceMatrix")

    @field_validator("score", "total_fines", mode="before")
    @classmethod
    def coerce_number(cls, v: Any) -> Optional[Union[int, float]]:
        return _as_number(v)

    @field_validator("risk_level", mode="before")
    @classmethod
    def coerce_risk_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return {"label": v}
        if isinstance(v, RiskLevel):
            return v
        if isinstance(v, BaseModel):
            return v.model_dump()
        if isinstance(v, Mapping):
            return dict(v)
        return None

    @field_validator("violations", mode="before")
    @classmethod
    def coerce_violations(cls, v: Any) -> List[Any]:
        return _entries_as(v, Violation, "violations")

    @field_validator("recommendations", mode="before")
    @classmethod
    def coerce_recommendations(cls, v: Any) -> List[Any]:
        return _entries_as(v, Recommendation, "recommendations")

    @property
    def risk_label(self) -> Optional[str]:
        """Localized risk label, if the scoring engine supplied one."""
        return self.risk_level.label if self.risk_level else None

    def count_by_severity(self) -> Dict[str, int]:
        """Number of violations per severity value, in first-seen order."""
        counts: Dict[str, int] = {}
        for violation in self.violations:
            counts[violation.severity] = counts.get(violation.severity, 0) + 1
        return counts
