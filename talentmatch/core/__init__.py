"""
Core business logic modules for TalentMatch.

Submodules:
- matching: String similarity, candidate-job scoring and ranking
"""
