"""
Core scoring and analysis logic for atsfit.

Submodules:
- domain: job family classification, bullet analysis, rewrite strategies
- matching: ATS scoring and quick keyword matching
- role_profiles: reference role library for résumé-only scans
"""
