"""
Schema Tests
============

Tests for assessment input coercion and OCSF output serialization.

Author: Tikun13 Team
Version: 1.0.0
"""

from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel

from shared.schemas.assessment import AssessmentResult, Recommendation, Violation
from shared.schemas.ocsf import DocumentMetadata, OCSFDocument


class ScoredCheck(BaseModel):
    """Result row from a scoring engine with its own models."""
    category: str
    severity: str
    fine: Optional[int] = None


class TestViolation:
    """Tests for Violation coercion."""

    def test_valid(self):
        violation = Violation.model_validate({
            "description": "d",
            "category": "consent",
            "severity": "high",
            "law_reference": "סעיף 11",
            "fine": 10000,
        })

        assert violation.fine == 10000
        assert isinstance(violation.fine, int)

    def test_malformed_fine_becomes_none(self):
        assert Violation.model_validate({"fine": "unknown"}).fine is None
        assert Violation.model_validate({"fine": True}).fine is None
        assert Violation.model_validate({"fine": [1]}).fine is None

    def test_defaults(self):
        violation = Violation.model_validate({})

        assert violation.description == ""
        assert violation.category == ""
        assert violation.severity == ""
        assert violation.law_reference is None

    def test_extra_keys_kept(self):
        violation = Violation.model_validate({"category": "dpo", "question_id": "q17"})

        assert violation.model_dump()["question_id"] == "q17"


class TestAssessmentResult:
    """Tests for AssessmentResult coercion."""

    def test_camel_case_wire_format(self):
        result = AssessmentResult.model_validate({
            "score": 80,
            "riskLevel": {"label": "נמוך"},
            "totalFines": 0,
            "complianceMatrix": [["consent", True]],
        })

        assert result.risk_label == "נמוך"
        assert result.total_fines == 0
        assert result.compliance_matrix == [["consent", True]]
        assert result.violations == []
        assert result.recommendations == []

    def test_snake_case_accepted(self):
        result = AssessmentResult(total_fines=5, risk_level={"label": "גבוה"})

        assert result.total_fines == 5
        assert result.risk_label == "גבוה"

    def test_risk_level_as_plain_label(self):
        assert AssessmentResult.model_validate({"riskLevel": "קריטי"}).risk_label == "קריטי"

    def test_drops_malformed_entries(self):
        result = AssessmentResult.model_validate({
            "violations": [{"category": "consent"}, None, "x"],
            "recommendations": "not a list",
        })

        assert [v.category for v in result.violations] == ["consent"]
        assert result.recommendations == []

    def test_read_only_mappings_kept(self):
        result = AssessmentResult.model_validate({
            "violations": [MappingProxyType({"category": "consent", "severity": "high"})],
            "riskLevel": MappingProxyType({"label": "גבוה"}),
        })

        assert [v.category for v in result.violations] == ["consent"]
        assert result.risk_label == "גבוה"

    def test_other_pydantic_models_converted(self):
        result = AssessmentResult.model_validate({
            "violations": [ScoredCheck(category="dpo", severity="critical", fine=1000)],
            "recommendations": [ScoredCheck(category="dpo", severity="low")],
            "riskLevel": ScoredCheck(category="x", severity="y"),
        })

        assert result.violations[0].category == "dpo"
        assert result.violations[0].fine == 1000
        assert result.recommendations[0].category == "dpo"
        assert result.risk_label is None

    def test_count_by_severity(self):
        result = AssessmentResult.model_validate({
            "violations": [
                {"severity": "high"},
                {"severity": "low"},
                {"severity": "high"},
            ],
        })

        assert result.count_by_severity() == {"high": 2, "low": 1}


class TestRecommendation:
    def test_numeric_fields_stringified(self):
        rec = Recommendation.model_validate({"priority": 1, "timeline": 30})

        assert rec.priority == "1"
        assert rec.timeline == "30"


class TestOCSFDocument:
    """Tests for output serialization."""

    def test_absent_metadata_omitted(self):
        assert OCSFDocument(version="1.6.0").to_dict() == {
            "version": "1.6.0",
            "findings": [],
        }

    def test_metadata_serialized(self):
        document = OCSFDocument(
            version="1.6.0",
            metadata=DocumentMetadata(version="1.6.0", profiles=["privacy"]),
        )

        assert document.to_dict()["metadata"] == {
            "version": "1.6.0",
            "profiles": ["privacy"],
        }
