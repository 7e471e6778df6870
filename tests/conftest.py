"""
pytest configuration and fixtures.

Author: Tikun13 Team
Version: 1.0.0
"""

import random
from datetime import datetime, timezone

import pytest


# 2025-01-01T09:30:00Z
FIXED_INSTANT = datetime(2025, 1, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock frozen at FIXED_INSTANT."""
    from tikun13.ocsf.clock import FixedClock

    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def exporter(fixed_clock):
    """Exporter with pinned time and seeded identifiers."""
    from tikun13.config import Settings
    from tikun13.ocsf.clock import UIDGenerator
    from tikun13.ocsf.exporter import OCSFExporter

    return OCSFExporter(
        clock=fixed_clock,
        uid_generator=UIDGenerator(rng=random.Random(13)),
        config=Settings(),
    )


@pytest.fixture
def sample_answers():
    """Questionnaire answers including identifying fields."""
    return {
        "org_type": "private",
        "data_subjects_count": "100k_500k",
        "sensitive_data": ["medical", "financial"],
        "organization_name": "Acme Clinics Ltd",
        "contact_details": "dpo@acme.example",
        "has_privacy_policy": "no",
        "security_officer": "yes",
    }


@pytest.fixture
def sample_results():
    """Assessment result in the scoring engine's wire format."""
    return {
        "score": 42,
        "riskLevel": {"label": "גבוה", "color": "#f97316"},
        "violations": [
            {
                "description": "אין מנגנון לקבלת הסכמה מדעת",
                "category": "consent",
                "severity": "critical",
                "law_reference": "סעיף 11",
                "fine": 50000,
            },
            {
                "description": "לא מונה ממונה הגנת פרטיות",
                "category": "dpo",
                "severity": "high",
                "law_reference": "סעיף 17ב1",
                "fine": 150000,
            },
            {
                "description": "העברת מידע לצד שלישי ללא הסכם",
                "category": "third_party",
                "severity": "medium",
            },
        ],
        "totalFines": 200000,
        "recommendations": [
            {
                "priority": "urgent",
                "category": "consent",
                "action": "הטמעת מנגנון הסכמה",
                "description": "יש ליישם טופס הסכמה מפורש",
                "timeline": "30 יום",
            },
            {
                "priority": "high",
                "category": "dpo",
                "action": "מינוי ממונה הגנת פרטיות",
                "description": "חובה לגופים בהיקף גדול",
                "timeline": "60 יום",
                "reference": "סעיף 17ב1",
            },
        ],
        "complianceMatrix": {"consent": False, "dpo": False, "security": True},
    }
