import logging

from fastapi import APIRouter, HTTPException, Request

from resume_ats.core.rate_limit import rate_limit
from resume_ats.schemas import AnalysisResult, AnalyzeRequest, ATSFeedback, FeedbackRequest
from resume_ats.services.ats_analysis import analyze_resume_for_ats
from resume_ats.services.feedback import generate_feedback

router = APIRouter()
logger = logging.getLogger(__name__)


def _raise_invalid_input(exc: Exception) -> None:
    logger.warning("ats_invalid_input: %s", exc)
    raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/ats/analyze", response_model=AnalysisResult)
@rate_limit()
def ats_analyze(request: Request, payload: AnalyzeRequest):
    _ = request
    try:
        return analyze_resume_for_ats(payload.resume, payload.job_description)
    except (TypeError, ValueError) as exc:
        _raise_invalid_input(exc)


@router.post("/ats/feedback", response_model=ATSFeedback)
@rate_limit()
def ats_feedback(request: Request, payload: FeedbackRequest):
    _ = request
    try:
        return generate_feedback(payload.resume, payload.job_description, analysis=payload.analysis)
    except (TypeError, ValueError) as exc:
        _raise_invalid_input(exc)
