"""
Answer Sanitization
===================

Removes directly-identifying answers before they are embedded in an
exported finding.

Author: Tikun13 Team
Version: 1.0.0
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from tikun13.ocsf.constants import DIRECTLY_IDENTIFYING_FIELDS


def sanitize_answers(
    answers: Mapping[str, Any],
    extra_fields: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """
    Return a shallow copy of answers without identifying fields.

    ``organization_name`` and ``contact_details`` are always removed;
    ``extra_fields`` adds to that list and can never shorten it. Keys are
    stringified, matching the JSON object they end up in. The input
    mapping is left untouched.

    Args:
        answers: Questionnaire answers
        extra_fields: Additional keys to strip

    Returns:
        New dict safe to export
    """
    redacted = set(DIRECTLY_IDENTIFYING_FIELDS)
    if extra_fields:
        redacted.update(extra_fields)
    return {
        str(key): value
        for key, value in answers.items()
        if str(key) not in redacted
    }
