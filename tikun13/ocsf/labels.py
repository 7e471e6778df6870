"""
Localized Label Tables
======================

Display strings and reference links used in exported findings.

These tables are data: extend them here without touching the mapping
code. Every lookup goes through ``.get`` with a default, so a missing key
never raises.

Author: Tikun13 Team
Version: 1.0.0
"""

from types import MappingProxyType


# Risk label from the scoring engine → OCSF risk_level_id
RISK_LEVEL_IDS = MappingProxyType({
    "קריטי": 4,        # Critical
    "גבוה מאוד": 4,    # Very high, reported as Critical
    "גבוה": 3,         # High
    "בינוני": 2,       # Medium
    "נמוך": 1,         # Low
    "מינימלי": 0,      # Minimal
})

ORGANIZATION_TYPES = MappingProxyType({
    "public": "גוף ציבורי",
    "private": "חברה פרטית",
    "databroker": "סוחר נתונים",
    "security": "גוף ביטחוני",
    "financial": "מוסד פיננסי",
    "healthcare": "מוסד רפואי",
})
DEFAULT_ORGANIZATION_TYPE = "ארגון"

DATA_SCALES = MappingProxyType({
    "less_10k": "Small (<10K)",
    "10k_100k": "Medium (10K-100K)",
    "100k_500k": "Large (100K-500K)",
    "500k_1m": "Very Large (500K-1M)",
    "over_1m": "Enterprise (>1M)",
})
DEFAULT_DATA_SCALE = "Unknown"

DATA_SECURITY_CATEGORY_NAMES = MappingProxyType({
    "consent": "Consent Management",
    "data_subjects": "Data Subject Rights",
    "access_rights": "Access Control",
    "data_minimization": "Data Minimization",
    "privacy_notice": "Privacy Notice",
    "third_party": "Third Party Sharing",
})
DEFAULT_DATA_SECURITY_CATEGORY = "Privacy Violation"

KB_ARTICLES = MappingProxyType({
    "dpo": ("https://www.gov.il/he/departments/guides/data_protection_officer",),
    "registration": ("https://www.gov.il/he/service/database_registration",),
    "security": ("https://www.gov.il/he/departments/guides/data_security_regulations",),
    "consent": ("https://www.gov.il/he/departments/guides/consent_management",),
    "access_rights": ("https://www.gov.il/he/departments/guides/data_subject_rights",),
    "privacy_notice": ("https://www.gov.il/he/departments/guides/privacy_policy_requirements",),
})
KB_ARTICLE_FALLBACK = "tikun13-{category}-guide"

# Compliance context
REQUIREMENT = "Israeli Privacy Protection Law - Amendment 13"
STANDARD = "IL-PPL-Amendment-13-2025"
STATUS_NON_COMPLIANT = "Non-Compliant"
DEFAULT_CONTROL = "General Requirement"
DEFAULT_POLICY = "Privacy Protection Policy"
DETECTION_SYSTEM = "Amendment 13 Compliance Assessment"
ASSESSMENT_TYPE = "Amendment 13 Compliance Assessment"
LOG_NAME = "Amendment13ComplianceAssessment"
LOG_PROVIDER = "Tikun13Checker"
COMPLIANCE_EXTENSION_NAME = "Israeli Privacy Law Amendment 13"
DATA_SECURITY_EXTENSION_NAME = "Israeli Privacy Law Data Protection"
PRIVACY_VIOLATION_TYPE = "Privacy Violation"
DEFAULT_RECOMMENDATION_REFERENCE = "Amendment 13 Requirements"
UNKNOWN_RISK_LEVEL = "Unknown"

# Hebrew description fragments
DETAIL_TEMPLATE = "{description}. סעיף חוק: {law}. קטגוריה: {category}. קנס פוטנציאלי: ₪{fine}"
DEFAULT_LAW_SECTION = "כללי"
REMEDIATION_TEMPLATE = "יש לתקן את ההפרה בהתאם לדרישות {law}"
DEFAULT_REMEDIATION_LAW = "תיקון 13"
SENSITIVE_DATA_FRAGMENT = ". מידע רגיש: {types}"
DATA_SCALE_FRAGMENT = ". היקף נושאי מידע: {scale}"
