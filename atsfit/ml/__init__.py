"""
Text-understanding modules for atsfit.

Submodules:
- nlp: normalization, link extraction, résumé and job-description parsing
"""
