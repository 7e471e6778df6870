"""
OCSF Output Schemas
===================

Output contract of the exporter: OCSF 1.6.0 findings.

Classes:
    - ComplianceFinding: OCSF class 2003 (Compliance Finding)
    - DataSecurityFinding: OCSF class 2006 (Data Security Finding)
    - OCSFDocument: versioned envelope around a list of findings
    - CombinedReport: both finding sets plus summary and recommendations

These are the STABLE contracts consumed by dashboards and SIEM
ingesters. Do NOT change field names without versioning.

Author: Tikun13 Team
Version: 1.0.0
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class OCSFModel(BaseModel):
    """Base for all OCSF output models."""

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-ready dictionary.

        Fields left as None are omitted, so an absent value never shows
        up as ``null`` in the exported document. Values with no JSON
        form, such as arbitrary objects in free-form answers, are
        rendered with ``str()``.
        """
        return self.model_dump(mode="json", exclude_none=True, fallback=str)


# =============================================================================
# Metadata
# =============================================================================


class Product(OCSFModel):
    """OCSF product descriptor."""
    name: str
    vendor_name: str
    version: str


class Extension(OCSFModel):
    """OCSF extension reference."""
    name: str
    version: str


class DocumentMetadata(OCSFModel):
    """Envelope-level metadata of an exported document."""
    version: str
    profiles: List[str] = Field(default_factory=list)
    extension: Optional[Extension] = None
    product: Optional[Product] = None


class FindingMetadata(OCSFModel):
    """Per-finding OCSF metadata object."""
    version: str
    product: Product
    original_time: str = Field(..., description="ISO-8601 UTC creation time")
    processed_time: int = Field(..., description="Epoch milliseconds")
    log_name: Optional[str] = None
    log_provider: Optional[str] = None


# =============================================================================
# Shared finding objects
# =============================================================================


class FindingInfo(OCSFModel):
    """OCSF finding_info object."""
    title: str
    uid: str
    desc: str
    types: List[str] = Field(default_factory=list)
    created_time: int
    modified_time: Optional[int] = None
    product_uid: str


# =============================================================================
# Compliance Finding (2003)
# =============================================================================


class Compliance(OCSFModel):
    """OCSF compliance object."""
    requirements: List[str] = Field(default_factory=list)
    control: str
    standards: List[str] = Field(default_factory=list)
    status: str
    status_detail: str


class Remediation(OCSFModel):
    """OCSF remediation object."""
    desc: str
    kb_articles: List[str] = Field(default_factory=list)


class Organization(OCSFModel):
    """OCSF organization object (type and scale only, never the name)."""
    name: str
    ou_name: str


class ComplianceUnmapped(OCSFModel):
    """Assessment context with no OCSF attribute of its own."""
    fine_amount_ils: Optional[Union[int, float]] = None
    violation_category: str
    sensitive_data_types: List[Any] = Field(default_factory=list)
    compliance_score: Optional[Union[int, float]] = None
    assessment_answers: Dict[str, Any] = Field(default_factory=dict)


class ComplianceFinding(OCSFModel):
    """
    OCSF Compliance Finding (class_uid 2003).

    One instance per violation reported by the scoring engine.
    """

    # Required fields
    activity_id: int = 1
    category_uid: int = 2
    class_uid: int = 2003
    time: int
    severity_id: int
    type_uid: int = 200301

    compliance: Compliance
    finding_info: FindingInfo

    # Risk and impact
    risk_level_id: int
    impact_id: int
    confidence_id: int = 3

    # Status tracking
    status_id: int = 1
    disposition_id: int = 99

    remediation: Remediation
    impact_score: Union[int, float] = 0
    metadata: FindingMetadata
    organization: Organization
    unmapped: ComplianceUnmapped


# =============================================================================
# Data Security Finding (2006)
# =============================================================================


class DataSecurity(OCSFModel):
    """OCSF data_security object."""
    category_name: str
    confidentiality_id: int
    detection_system: str
    policy: str


class Resource(OCSFModel):
    """Resource affected by a data security finding."""
    type: str
    name: str
    uid: str
    criticality: int


class DataSecurityUnmapped(OCSFModel):
    """Data-scale context with no OCSF attribute of its own."""
    data_subjects_count: Optional[Any] = None
    sensitive_data_types: List[Any] = Field(default_factory=list)
    violation_details: Dict[str, Any] = Field(default_factory=dict)


class DataSecurityFinding(OCSFModel):
    """
    OCSF Data Security Finding (class_uid 2006).

    Emitted for violations in the data-protection categories only.
    """

    activity_id: int = 2
    category_uid: int = 2
    class_uid: int = 2006
    time: int
    severity_id: int
    type_uid: int = 200602

    data_security: DataSecurity
    finding_info: FindingInfo

    is_suspected_breach: bool

    impact_id: int
    risk_level_id: int

    disposition_id: int
    status_id: int = 1

    resources: List[Resource] = Field(default_factory=list)
    metadata: FindingMetadata
    unmapped: DataSecurityUnmapped


# =============================================================================
# Documents
# =============================================================================


class OCSFDocument(OCSFModel):
    """
    Versioned list of findings.

    ``metadata`` is None for the empty data security document; consumers
    must tolerate its absence.
    """
    version: str
    metadata: Optional[DocumentMetadata] = None
    findings: List[Union[ComplianceFinding, DataSecurityFinding]] = Field(
        default_factory=list
    )


class OCSFRecommendation(OCSFModel):
    """Recommendation record carried alongside the findings."""
    priority: Optional[str] = None
    category: Optional[str] = None
    action: Optional[str] = None
    description: Optional[str] = None
    timeline: Optional[str] = None
    reference: str
    uid: str


class ReportMetadata(OCSFModel):
    """Header of a combined report."""
    generated_at: str
    assessment_type: str
    organization_type: str
    data_scale: str


class ReportSummary(OCSFModel):
    """Headline numbers of a combined report."""
    compliance_score: Optional[Union[int, float]] = None
    risk_level: str
    total_violations: int
    total_fines: Optional[Union[int, float]] = None
    critical_violations: int
    high_violations: int
    violations_by_severity: Dict[str, int] = Field(default_factory=dict)
    requires_dpo: bool
    has_sensitive_data: bool


class CombinedReport(OCSFModel):
    """Complete export of one assessment."""
    version: str
    report_id: str
    report_metadata: ReportMetadata
    summary: ReportSummary
    compliance_findings: OCSFDocument
    data_security_findings: OCSFDocument
    recommendations: List[OCSFRecommendation] = Field(default_factory=list)
    compliance_matrix: Any = None
