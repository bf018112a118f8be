"""
atsfit - deterministic résumé / job-description parsing and ATS scoring.

Turns free-form résumé and job-posting text into structured profiles and
scores how well one fits the other.
"""

__app_name__ = "atsfit"
__version__ = "0.1.0"
