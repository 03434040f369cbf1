"""Deterministic ATS scoring and rule-based feedback for structured resumes."""

from resume_ats.services.ats_analysis import ATSEngine, analyze_resume_for_ats
from resume_ats.services.feedback import generate_feedback

analyze = analyze_resume_for_ats

__all__ = ["ATSEngine", "analyze", "analyze_resume_for_ats", "generate_feedback"]
