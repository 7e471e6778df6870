"""
OCSF Constants
==============

Enumerated values of OCSF 1.6.0 used by the exporter.

Author: Tikun13 Team
Version: 1.0.0
"""

from enum import IntEnum


FINDINGS_CATEGORY_UID = 2

COMPLIANCE_FINDING_CLASS_UID = 2003
DATA_SECURITY_FINDING_CLASS_UID = 2006


class ActivityId(IntEnum):
    """Finding activity (type_uid = class_uid * 100 + activity_id)."""
    CREATE = 1
    READ = 2


class StatusId(IntEnum):
    NEW = 1


class ConfidenceId(IntEnum):
    HIGH = 3


class DispositionId(IntEnum):
    TRUE_POSITIVE = 2
    OTHER = 99


class ConfidentialityId(IntEnum):
    """Data security confidentiality classification."""
    PUBLIC = 1
    INTERNAL = 2
    CONFIDENTIAL = 3
    SECRET = 4


def type_uid(class_uid: int, activity: ActivityId) -> int:
    """OCSF type_uid for a class/activity pair."""
    return class_uid * 100 + int(activity)


# Violation categories exported as Data Security Findings
DATA_SECURITY_CATEGORIES = (
    "data_subjects",
    "consent",
    "access_rights",
    "data_minimization",
    "privacy_notice",
    "third_party",
)

# Categories that indicate personal data may already have been mishandled
SUSPECTED_BREACH_CATEGORIES = frozenset({"consent", "data_subjects"})

# data_subjects_count buckets large enough to require a DPO
LARGE_SCALE_BUCKETS = frozenset({"100k_500k", "500k_1m", "over_1m"})

# Organization types that always require a DPO
DPO_MANDATORY_ORG_TYPES = frozenset({"public", "databroker"})

# Answers that identify the organization or a person directly
DIRECTLY_IDENTIFYING_FIELDS = frozenset({"organization_name", "contact_details"})
