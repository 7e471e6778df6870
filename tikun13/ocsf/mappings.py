"""
OCSF Mapping Rules
==================

Translation of assessment vocabulary into OCSF enumerations and
display labels.

Every function here is total: unknown or missing input maps to a fixed
fallback value, never to an exception.

Author: Tikun13 Team
Version: 1.0.0
"""

from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional

from tikun13.ocsf import labels
from tikun13.ocsf.constants import (
    DATA_SECURITY_CATEGORIES,
    DPO_MANDATORY_ORG_TYPES,
    LARGE_SCALE_BUCKETS,
    SUSPECTED_BREACH_CATEGORIES,
    ConfidentialityId,
    DispositionId,
)


class Severity(Enum):
    """
    Violation severity with its OCSF severity_id and impact_id.
    """
    CRITICAL = ("critical", 5, 4)
    HIGH = ("high", 4, 3)
    MEDIUM = ("medium", 3, 2)
    LOW = ("low", 2, 1)
    INFO = ("info", 1, 0)
    UNKNOWN = ("unknown", 0, 0)

    def __init__(self, value: str, severity_id: int, impact_id: int):
        self._value_ = value
        self.severity_id = severity_id
        self.impact_id = impact_id

    @classmethod
    def from_string(cls, value: Any) -> "Severity":
        """Get severity from string, defaulting to UNKNOWN."""
        if not isinstance(value, str):
            return cls.UNKNOWN
        for level in cls:
            if level.value == value:
                return level
        return cls.UNKNOWN


def map_severity(severity: Any) -> int:
    """Violation severity → OCSF severity_id (unknown → 0)."""
    return Severity.from_string(severity).severity_id


def map_impact(severity: Any) -> int:
    """Violation severity → OCSF impact_id (unknown → 0)."""
    return Severity.from_string(severity).impact_id


def map_risk_level(risk_label: Optional[str]) -> int:
    """
    Localized risk label → OCSF risk_level_id.

    An unrecognized or missing label maps to 0, the same value as the
    lowest known label.
    """
    if not isinstance(risk_label, str):
        return 0
    return labels.RISK_LEVEL_IDS.get(risk_label, 0)


def is_data_security_category(category: Any) -> bool:
    return category in DATA_SECURITY_CATEGORIES


def is_suspected_breach(category: Any) -> bool:
    """True for categories where personal data may already be misused."""
    return isinstance(category, str) and category in SUSPECTED_BREACH_CATEGORIES


def map_disposition(suspected_breach: bool) -> int:
    return int(DispositionId.TRUE_POSITIVE if suspected_breach else DispositionId.OTHER)


def sensitive_data_types(sensitive_data: Any) -> List[Any]:
    """
    Normalize answers.sensitive_data to a list.

    A bare string counts as a single tag.
    Sets are sorted so that repeated exports list tags in the same order.
    """
    if isinstance(sensitive_data, str):
        return [sensitive_data] if sensitive_data else []
    if sensitive_data is None or isinstance(sensitive_data, (bytes, Mapping)):
        return []
    if isinstance(sensitive_data, (set, frozenset)):
        return sorted(sensitive_data, key=str)
    if isinstance(sensitive_data, Iterable):
        return list(sensitive_data)
    return []


def get_confidentiality_level(sensitive_data: Any) -> int:
    """
    Confidentiality of the processed data, highest matching tier wins.

        no sensitive data        → 1 (Public)
        medical or biometric     → 4 (Secret)
        financial or criminal    → 3 (Confidential)
        anything else            → 2 (Internal)
    """
    tags = sensitive_data_types(sensitive_data)
    if not tags:
        return int(ConfidentialityId.PUBLIC)
    if "medical" in tags or "biometric" in tags:
        return int(ConfidentialityId.SECRET)
    if "financial" in tags or "criminal" in tags:
        return int(ConfidentialityId.CONFIDENTIAL)
    return int(ConfidentialityId.INTERNAL)


def requires_dpo(answers: Mapping[str, Any]) -> bool:
    """
    Whether the organization must appoint a Data Protection Officer.

    Required for public bodies and data brokers, and for any organization
    holding sensitive data on a large number of data subjects.
    """
    org_type = answers.get("org_type")
    if isinstance(org_type, str) and org_type in DPO_MANDATORY_ORG_TYPES:
        return True
    scale = answers.get("data_subjects_count")
    return (
        bool(sensitive_data_types(answers.get("sensitive_data")))
        and isinstance(scale, str)
        and scale in LARGE_SCALE_BUCKETS
    )


def get_organization_type(org_type: Any) -> str:
    if not isinstance(org_type, str):
        return labels.DEFAULT_ORGANIZATION_TYPE
    return labels.ORGANIZATION_TYPES.get(org_type, labels.DEFAULT_ORGANIZATION_TYPE)


def get_data_scale(data_subjects_count: Any) -> str:
    if not isinstance(data_subjects_count, str):
        return labels.DEFAULT_DATA_SCALE
    return labels.DATA_SCALES.get(data_subjects_count, labels.DEFAULT_DATA_SCALE)


def get_data_security_category(category: Any) -> str:
    if not isinstance(category, str):
        return labels.DEFAULT_DATA_SECURITY_CATEGORY
    return labels.DATA_SECURITY_CATEGORY_NAMES.get(
        category, labels.DEFAULT_DATA_SECURITY_CATEGORY
    )


def get_knowledge_base_articles(category: Any) -> List[str]:
    """Guidance links for a violation category."""
    if isinstance(category, str) and category in labels.KB_ARTICLES:
        return list(labels.KB_ARTICLES[category])
    return [labels.KB_ARTICLE_FALLBACK.format(category=category)]


def format_amount(amount: Any) -> str:
    """Thousands-separated amount, '0' when absent."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or not amount:
        return "0"
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    return f"{amount:,}"
