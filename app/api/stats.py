"""
Per-category statistics API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from app.database import get_db
from app.schemas.progress import UserStats, CategoryStats
from app.services.stats_service import stats_service

router = APIRouter(prefix="/api", tags=["stats"])
logger = logging.getLogger(__name__)


@router.get("/stats/{user_id}", response_model=UserStats)
def get_user_stats(
    user_id: str,
    db: Session = Depends(get_db)
):
    """
    Get solved-question statistics for a user

    Returns, per category:
    - Number of questions solved
    - Number answered correctly
    - Average time spent (seconds)
    """
    logger.info(f"Fetching stats for user {user_id}")

    stats = stats_service.stats_for(db, user_id)

    return UserStats(
        user_id=user_id,
        categories=[CategoryStats(**item) for item in stats]
    )
