import logging

from fastapi import APIRouter, HTTPException, status

from resume_ats.core.config import get_default_scoring_config

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health", summary="Health Check", description="Check that the service and its scoring config are usable.")
def health_check():
    try:
        config = get_default_scoring_config()
    except RuntimeError as exc:
        logger.error("health_check_scoring_config_failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Scoring configuration is unavailable.",
        ) from exc
    return {"status": "healthy", "stop_words": len(config.stop_words)}
