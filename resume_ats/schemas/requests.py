from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_ats.core.config import settings

from .analysis import AnalysisResult


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume: dict[str, Any] = Field(default_factory=dict)
    job_description: str | None = Field(default="", max_length=settings.max_job_description_chars)


class FeedbackRequest(AnalyzeRequest):
    analysis: AnalysisResult | None = None
