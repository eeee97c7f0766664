"""
TalentMatch - Applicant Tracking System matching backend.

Ranks candidates against job postings (and job postings against candidates)
with an explainable, weighted fuzzy-matching engine.
"""

__app_name__ = "TalentMatch"
__version__ = "0.1.0"
