"""
Per-category statistics over solved questions
"""
import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session
from sqlalchemy import func, case
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import StoreError
from app.models import SolvedQuestion

logger = logging.getLogger(__name__)


class StatsService:
    """Service for grouped counts and averages"""

    def stats_for(self, db: Session, user_id: str) -> List[Dict[str, Any]]:
        """
        Group the user's solved records by category

        Args:
            db: Database session
            user_id: Opaque user identifier

        Returns:
            One dict per category with total_solved, correct_count and
            avg_time (None when no record has a time)
        """

        try:
            rows = db.query(
                SolvedQuestion.category,
                func.count(SolvedQuestion.id).label("total_solved"),
                func.sum(case((SolvedQuestion.is_correct, 1), else_=0)).label("correct_count"),
                func.avg(SolvedQuestion.time_spent).label("avg_time"),
            ).filter(
                SolvedQuestion.user_id == user_id
            ).group_by(
                SolvedQuestion.category
            ).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to aggregate stats for user {user_id}: {str(e)}")
            raise StoreError("Failed to aggregate statistics", detail=str(e)) from e

        stats = []
        for row in rows:
            stats.append({
                "category": row.category,
                "total_solved": int(row.total_solved),
                "correct_count": int(row.correct_count or 0),
                "avg_time": float(row.avg_time) if row.avg_time is not None else None
            })

        logger.info(f"Stats computed for user {user_id}: {len(stats)} categories")

        return stats


# Global instance
stats_service = StatsService()
