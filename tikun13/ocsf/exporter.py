"""
OCSF Finding Exporter
=====================

Exports Amendment 13 assessment results as OCSF 1.6.0 findings.

Transforms:
    - Violation → Compliance Finding (class_uid 2003)
    - Data-protection Violation → Data Security Finding (class_uid 2006)
    - Recommendation → OCSF recommendation record
    - AssessmentResult + answers → combined report

The exporter never raises on incomplete assessment data; missing values
fall back to documented defaults so that a report can always be
produced.

Usage:
    from tikun13.ocsf import OCSFExporter, render

    exporter = OCSFExporter()
    report = exporter.export_combined_report(results, answers)
    print(render(report))

Author: Tikun13 Team
Version: 1.0.0
"""

import json
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel

from shared.schemas.assessment import AssessmentResult, Recommendation, Violation
from shared.schemas.ocsf import (
    CombinedReport,
    Compliance,
    ComplianceFinding,
    ComplianceUnmapped,
    DataSecurity,
    DataSecurityFinding,
    DataSecurityUnmapped,
    DocumentMetadata,
    Extension,
    FindingInfo,
    FindingMetadata,
    OCSFDocument,
    OCSFModel,
    OCSFRecommendation,
    Organization,
    Product,
    Remediation,
    ReportMetadata,
    ReportSummary,
    Resource,
)
from tikun13.config import Settings, get_settings
from tikun13.logging import get_logger
from tikun13.ocsf import labels
from tikun13.ocsf.clock import Clock, SystemClock, UIDGenerator, to_epoch_ms, to_iso
from tikun13.ocsf.constants import (
    COMPLIANCE_FINDING_CLASS_UID,
    DATA_SECURITY_FINDING_CLASS_UID,
    FINDINGS_CATEGORY_UID,
    ActivityId,
    ConfidenceId,
    DispositionId,
    StatusId,
    type_uid,
)
from tikun13.ocsf.mappings import (
    format_amount,
    get_confidentiality_level,
    get_data_scale,
    get_data_security_category,
    get_knowledge_base_articles,
    get_organization_type,
    is_data_security_category,
    is_suspected_breach,
    map_disposition,
    map_impact,
    map_risk_level,
    map_severity,
    requires_dpo,
    sensitive_data_types,
)
from tikun13.ocsf.privacy import sanitize_answers


logger = get_logger(__name__)

ResultsInput = Union[AssessmentResult, Mapping[str, Any], None]
AnswersInput = Optional[Mapping[str, Any]]


class OCSFExporter:
    """
    Export assessment results as OCSF findings.

    The exporter holds only its configuration, clock and identifier
    generator; every call builds fresh output and leaves its inputs
    untouched, so one instance can serve concurrent callers.

    Example:
        exporter = OCSFExporter(clock=FixedClock(datetime(2025, 1, 1)))
        document = exporter.export_compliance_findings(results, answers)
        document.to_dict()["findings"][0]["severity_id"]
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        uid_generator: Optional[UIDGenerator] = None,
        config: Optional[Settings] = None,
    ):
        self.config = config or get_settings()
        self.clock = clock or SystemClock()
        self.uids = uid_generator or UIDGenerator()
        self.version = self.config.ocsf_version
        self.product = Product(**self.config.product)

    # =========================================================================
    # Public operations
    # =========================================================================

    def export_compliance_findings(
        self,
        results: ResultsInput,
        answers: AnswersInput,
    ) -> OCSFDocument:
        """
        Map every violation to a Compliance Finding (class_uid 2003).

        Args:
            results: Assessment result from the scoring engine
            answers: Questionnaire answers

        Returns:
            OCSFDocument, with an empty findings list when there are no
            violations
        """
        result, answer_map = self._coerce(results, answers)
        return self._compliance_document(result, answer_map)

    def export_data_security_findings(
        self,
        results: ResultsInput,
        answers: AnswersInput,
    ) -> OCSFDocument:
        """
        Map data-protection violations to Data Security Findings (2006).

        Only violations in the data-protection categories are exported.
        When none match, the returned document has no metadata.
        """
        result, answer_map = self._coerce(results, answers)
        return self._data_security_document(result, answer_map)

    def export_combined_report(
        self,
        results: ResultsInput,
        answers: AnswersInput,
    ) -> CombinedReport:
        """
        Export both finding sets with a summary and recommendations.

        Args:
            results: Assessment result from the scoring engine
            answers: Questionnaire answers

        Returns:
            CombinedReport
        """
        result, answer_map = self._coerce(results, answers)
        now = self.clock.now()
        by_severity = result.count_by_severity()

        report = CombinedReport(
            version=self.version,
            report_id=self.generate_uid(),
            report_metadata=ReportMetadata(
                generated_at=to_iso(now),
                assessment_type=labels.ASSESSMENT_TYPE,
                organization_type=get_organization_type(answer_map.get("org_type")),
                data_scale=get_data_scale(answer_map.get("data_subjects_count")),
            ),
            summary=ReportSummary(
                compliance_score=result.score,
                risk_level=result.risk_label or labels.UNKNOWN_RISK_LEVEL,
                total_violations=len(result.violations),
                total_fines=result.total_fines,
                critical_violations=by_severity.get("critical", 0),
                high_violations=by_severity.get("high", 0),
                violations_by_severity=by_severity,
                requires_dpo=requires_dpo(answer_map),
                has_sensitive_data=bool(
                    sensitive_data_types(answer_map.get("sensitive_data"))
                ),
            ),
            compliance_findings=self._compliance_document(result, answer_map),
            data_security_findings=self._data_security_document(result, answer_map),
            recommendations=self.export_recommendations(result.recommendations),
            compliance_matrix=result.compliance_matrix,
        )

        logger.info(
            "combined_report_exported",
            report_id=report.report_id,
            violations=len(result.violations),
            recommendations=len(report.recommendations),
        )
        return report

    def export_recommendations(
        self,
        recommendations: Optional[Iterable[Any]],
    ) -> List[OCSFRecommendation]:
        """
        Map recommendations 1:1, giving each a fresh identifier.

        Args:
            recommendations: Recommendation models or dicts

        Returns:
            List of OCSFRecommendation in input order
        """
        records = []
        for index, rec in enumerate(_coerce_recommendations(recommendations)):
            records.append(OCSFRecommendation(
                priority=rec.priority,
                category=rec.category,
                action=rec.action,
                description=rec.description,
                timeline=rec.timeline,
                reference=rec.reference or labels.DEFAULT_RECOMMENDATION_REFERENCE,
                uid=self.uids.sequential(
                    self.config.recommendation_uid_prefix,
                    to_epoch_ms(self.clock.now()),
                    index,
                ),
            ))
        return records

    def generate_uid(self) -> str:
        """Random identifier: ``<prefix>-<epoch ms>-<9 base36 chars>``."""
        return self.uids.random(self.config.uid_prefix, to_epoch_ms(self.clock.now()))

    # =========================================================================
    # Documents
    # =========================================================================

    def _compliance_document(
        self,
        result: AssessmentResult,
        answers: Dict[str, Any],
    ) -> OCSFDocument:
        findings = [
            self._compliance_finding(violation, index, result, answers)
            for index, violation in enumerate(result.violations)
        ]

        logger.info("compliance_findings_exported", findings=len(findings))
        return OCSFDocument(
            version=self.version,
            metadata=DocumentMetadata(
                version=self.version,
                profiles=["compliance", "privacy"],
                extension=Extension(
                    name=labels.COMPLIANCE_EXTENSION_NAME,
                    version=self.config.extension_version,
                ),
                product=self.product,
            ),
            findings=findings,
        )

    def _data_security_document(
        self,
        result: AssessmentResult,
        answers: Dict[str, Any],
    ) -> OCSFDocument:
        data_violations = [
            v for v in result.violations if is_data_security_category(v.category)
        ]

        if not data_violations:
            logger.info("data_security_findings_exported", findings=0)
            return OCSFDocument(version=self.version, findings=[])

        findings = [
            self._data_security_finding(violation, index, result, answers)
            for index, violation in enumerate(data_violations)
        ]

        logger.info("data_security_findings_exported", findings=len(findings))
        return OCSFDocument(
            version=self.version,
            metadata=DocumentMetadata(
                version=self.version,
                profiles=["data_security", "privacy"],
                extension=Extension(
                    name=labels.DATA_SECURITY_EXTENSION_NAME,
                    version=self.config.extension_version,
                ),
                product=self.product,
            ),
            findings=findings,
        )

    # =========================================================================
    # Findings
    # =========================================================================

    def _compliance_finding(
        self,
        violation: Violation,
        index: int,
        result: AssessmentResult,
        answers: Dict[str, Any],
    ) -> ComplianceFinding:
        now = self.clock.now()
        timestamp = to_epoch_ms(now)

        return ComplianceFinding(
            activity_id=int(ActivityId.CREATE),
            category_uid=FINDINGS_CATEGORY_UID,
            class_uid=COMPLIANCE_FINDING_CLASS_UID,
            time=timestamp,
            severity_id=map_severity(violation.severity),
            type_uid=type_uid(COMPLIANCE_FINDING_CLASS_UID, ActivityId.CREATE),
            compliance=Compliance(
                requirements=[labels.REQUIREMENT],
                control=violation.law_reference or labels.DEFAULT_CONTROL,
                standards=[labels.STANDARD],
                status=labels.STATUS_NON_COMPLIANT,
                status_detail=violation.description,
            ),
            finding_info=FindingInfo(
                title=violation.description,
                uid=self.uids.sequential(self.config.uid_prefix, timestamp, index),
                desc=_detailed_description(violation),
                types=[violation.category],
                created_time=timestamp,
                modified_time=timestamp,
                product_uid=self.config.product_uid,
            ),
            risk_level_id=map_risk_level(result.risk_label),
            impact_id=map_impact(violation.severity),
            confidence_id=int(ConfidenceId.HIGH),
            status_id=int(StatusId.NEW),
            disposition_id=int(DispositionId.OTHER),
            remediation=Remediation(
                desc=_remediation_text(violation, result.recommendations),
                kb_articles=get_knowledge_base_articles(violation.category),
            ),
            impact_score=violation.fine or 0,
            metadata=FindingMetadata(
                version=self.version,
                product=self.product,
                original_time=to_iso(now),
                processed_time=timestamp,
                log_name=labels.LOG_NAME,
                log_provider=labels.LOG_PROVIDER,
            ),
            organization=Organization(
                name=get_organization_type(answers.get("org_type")),
                ou_name=get_data_scale(answers.get("data_subjects_count")),
            ),
            unmapped=ComplianceUnmapped(
                fine_amount_ils=violation.fine,
                violation_category=violation.category,
                sensitive_data_types=sensitive_data_types(answers.get("sensitive_data")),
                compliance_score=result.score,
                assessment_answers=sanitize_answers(
                    answers, self.config.redacted_answer_fields
                ),
            ),
        )

    def _data_security_finding(
        self,
        violation: Violation,
        index: int,
        result: AssessmentResult,
        answers: Dict[str, Any],
    ) -> DataSecurityFinding:
        now = self.clock.now()
        timestamp = to_epoch_ms(now)
        suspected_breach = is_suspected_breach(violation.category)

        return DataSecurityFinding(
            activity_id=int(ActivityId.READ),
            category_uid=FINDINGS_CATEGORY_UID,
            class_uid=DATA_SECURITY_FINDING_CLASS_UID,
            time=timestamp,
            severity_id=map_severity(violation.severity),
            type_uid=type_uid(DATA_SECURITY_FINDING_CLASS_UID, ActivityId.READ),
            data_security=DataSecurity(
                category_name=get_data_security_category(violation.category),
                confidentiality_id=get_confidentiality_level(
                    answers.get("sensitive_data")
                ),
                detection_system=labels.DETECTION_SYSTEM,
                policy=violation.law_reference or labels.DEFAULT_POLICY,
            ),
            finding_info=FindingInfo(
                title=violation.description,
                uid=self.uids.sequential(
                    f"{self.config.uid_prefix}-data", timestamp, index
                ),
                desc=_data_violation_description(violation, answers),
                types=[labels.PRIVACY_VIOLATION_TYPE, violation.category],
                created_time=timestamp,
                product_uid=self.config.product_uid,
            ),
            is_suspected_breach=suspected_breach,
            impact_id=map_impact(violation.severity),
            risk_level_id=map_risk_level(result.risk_label),
            disposition_id=map_disposition(suspected_breach),
            status_id=int(StatusId.NEW),
            resources=_affected_resources(violation, answers),
            metadata=FindingMetadata(
                version=self.version,
                product=self.product,
                original_time=to_iso(now),
                processed_time=timestamp,
            ),
            unmapped=DataSecurityUnmapped(
                data_subjects_count=answers.get("data_subjects_count"),
                sensitive_data_types=sensitive_data_types(answers.get("sensitive_data")),
                violation_details=violation.model_dump(mode="json", exclude_none=True),
            ),
        )

    # =========================================================================
    # Input handling
    # =========================================================================

    def _coerce(
        self,
        results: ResultsInput,
        answers: AnswersInput,
    ) -> Tuple[AssessmentResult, Dict[str, Any]]:
        """Bring both inputs into their working shapes without raising."""
        if isinstance(results, AssessmentResult):
            result = results
        elif isinstance(results, Mapping):
            result = AssessmentResult.model_validate(dict(results))
        else:
            if results is not None:
                logger.warning(
                    "unsupported_results_type", type=type(results).__name__
                )
            result = AssessmentResult()

        if isinstance(answers, Mapping):
            answer_map = dict(answers)
        else:
            if answers is not None:
                logger.warning(
                    "unsupported_answers_type", type=type(answers).__name__
                )
            answer_map = {}

        return result, answer_map


# =============================================================================
# Rendering
# =============================================================================


def render(document: OCSFModel, format: str = "json") -> str:
    """
    Render an exported document as text.

    Args:
        document: OCSFDocument or CombinedReport
        format: "json" for one indented JSON document, "ndjson" for one
            finding per line

    Returns:
        Rendered text

    Raises:
        ValueError: Unknown format
    """
    if format == "json":
        return json.dumps(document.to_dict(), ensure_ascii=False, indent=2)
    elif format == "ndjson":
        return "\n".join(
            json.dumps(finding.to_dict(), ensure_ascii=False)
            for finding in _findings_of(document)
        )
    else:
        raise ValueError(f"Unknown format: {format}")


def _findings_of(document: OCSFModel) -> List[OCSFModel]:
    if isinstance(document, CombinedReport):
        return (
            list(document.compliance_findings.findings)
            + list(document.data_security_findings.findings)
        )
    if isinstance(document, OCSFDocument):
        return list(document.findings)
    raise ValueError(f"No findings in {type(document).__name__}")


# =============================================================================
# Private Helpers
# =============================================================================


def _coerce_recommendations(recommendations: Optional[Iterable[Any]]) -> List[Recommendation]:
    if recommendations is None:
        return []
    coerced = []
    for rec in recommendations:
        if isinstance(rec, Recommendation):
            coerced.append(rec)
        elif isinstance(rec, Mapping):
            coerced.append(Recommendation.model_validate(dict(rec)))
        elif isinstance(rec, BaseModel):
            coerced.append(Recommendation.model_validate(rec.model_dump()))
        else:
            logger.warning("recommendation_skipped", type=type(rec).__name__)
    return coerced


def _detailed_description(violation: Violation) -> str:
    return labels.DETAIL_TEMPLATE.format(
        description=violation.description,
        law=violation.law_reference or labels.DEFAULT_LAW_SECTION,
        category=violation.category,
        fine=format_amount(violation.fine),
    )


def _remediation_text(violation: Violation, recommendations: List[Recommendation]) -> str:
    """Actions of same-category recommendations, or a generic instruction."""
    relevant = [r for r in recommendations if r.category == violation.category]
    if relevant:
        return "; ".join(r.action or "" for r in relevant)
    return labels.REMEDIATION_TEMPLATE.format(
        law=violation.law_reference or labels.DEFAULT_REMEDIATION_LAW
    )


def _data_violation_description(violation: Violation, answers: Dict[str, Any]) -> str:
    desc = violation.description
    tags = sensitive_data_types(answers.get("sensitive_data"))
    if tags:
        desc += labels.SENSITIVE_DATA_FRAGMENT.format(types=", ".join(str(t) for t in tags))
    if answers.get("data_subjects_count"):
        desc += labels.DATA_SCALE_FRAGMENT.format(
            scale=get_data_scale(answers.get("data_subjects_count"))
        )
    return desc


def _affected_resources(violation: Violation, answers: Dict[str, Any]) -> List[Resource]:
    resources = []

    if is_suspected_breach(violation.category):
        # Any answer to the sensitive data question, even "none", raises criticality
        resources.append(Resource(
            type="Database",
            name="Personal Data Repository",
            uid="pdr-001",
            criticality=4 if answers.get("sensitive_data") is not None else 2,
        ))

    if violation.category == "third_party":
        resources.append(Resource(
            type="Third Party Integration",
            name="External Data Processors",
            uid="ext-proc-001",
            criticality=3,
        ))

    return resources
