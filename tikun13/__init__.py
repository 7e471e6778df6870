"""
Tikun13 Core Package
====================

Reporting back end of the Amendment 13 (Israeli Privacy Protection Law)
self-assessment questionnaire.

This package contains:
    - ocsf/: OCSF 1.6.0 finding exporter
    - config.py: Settings loaded from the environment
    - logging.py: Structured logging setup

Author: Tikun13 Team
Version: 1.0.0
"""

__version__ = "1.0.0"
