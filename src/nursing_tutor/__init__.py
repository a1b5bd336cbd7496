"""Nursing education tutor.

Reference catalogs (medications, lab values, NANDA diagnoses, clinical
protocols, clinical cases), template-driven generators (case analysis,
care plans, study notes, research summaries) and a learner progress
subsystem, exposed as tools to a LangGraph tutor agent and a FastAPI API.
"""
