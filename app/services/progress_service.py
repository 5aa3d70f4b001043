"""
Progress tracking: solved-question records and unsolved question selection
"""
import logging
import random
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.exceptions import StoreError, ValidationError
from app.models import Question, SolvedQuestion
from app.models.question import generate_id
from app.services.question_service import question_service
from app.utils.validation import require_fields

logger = logging.getLogger(__name__)


class ProgressService:
    """
    Service for per-user question progress

    Selection algorithm:
    - Unsolved pool: category questions the user has not answered yet
    - Top-up: if the pool is short of the limit, add random already-solved
      questions from the same category
    - Shuffle the combined list and cut it to the limit
    """

    def solved_question_ids(
        self,
        db: Session,
        user_id: str,
        category: Optional[str] = None
    ) -> List[str]:
        """Ids of questions the user has answered, optionally within one category"""

        query = db.query(SolvedQuestion.question_id).filter(SolvedQuestion.user_id == user_id)
        if category is not None:
            query = query.filter(SolvedQuestion.category == category)

        try:
            return [row[0] for row in query.all()]
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch solved questions for user {user_id}: {str(e)}")
            raise StoreError("Failed to fetch solved questions", detail=str(e)) from e

    def select_unsolved(
        self,
        db: Session,
        user_id: str,
        category: str,
        limit: Optional[int] = None
    ) -> List[Question]:
        """
        Select a shuffled batch of questions the user has not solved yet

        Args:
            db: Database session
            user_id: Opaque user identifier
            category: Category to draw from
            limit: Batch size (default from settings)

        Returns:
            Up to `limit` distinct questions, min(limit, category size) in total
        """
        require_fields({"userId": user_id, "category": category})

        if limit is None:
            limit = settings.DEFAULT_QUESTION_LIMIT
        if limit < 1:
            raise ValidationError("limit must be a positive integer")

        solved_ids = self.solved_question_ids(db, user_id, category)
        pool = question_service.find_by_category_excluding(db, category, solved_ids)
        unsolved_count = len(pool)

        if len(pool) < limit:
            shortfall = limit - len(pool)
            fallback = question_service.find_by_category_excluding(
                db, category, [q.id for q in pool]
            )
            pool.extend(random.sample(fallback, min(shortfall, len(fallback))))

        random.shuffle(pool)
        selected = pool[:limit]

        logger.info(
            f"Selected {len(selected)} questions: user={user_id}, category={category}, "
            f"unsolved={unsolved_count}, solved={len(solved_ids)}, limit={limit}"
        )

        return selected

    def record_solved(
        self,
        db: Session,
        user_id: str,
        question_id: str,
        category: str,
        is_correct: Optional[bool],
        time_spent: Optional[float] = None
    ) -> SolvedQuestion:
        """
        Create or overwrite the solved record for (user_id, question_id)

        Raises:
            ValidationError: missing fields or negative time_spent
            StoreError: database failure
        """
        require_fields({
            "userId": user_id,
            "questionId": question_id,
            "category": category,
            "isCorrect": is_correct,
        })
        if time_spent is not None and time_spent < 0:
            raise ValidationError("timeSpent must not be negative")

        values = {
            "user_id": user_id,
            "question_id": question_id,
            "category": category,
            "is_correct": bool(is_correct),
            "time_spent": time_spent,
            "solved_at": datetime.now(timezone.utc),
        }

        try:
            self._upsert(db, values)
            db.commit()
            record = db.query(SolvedQuestion).filter(
                SolvedQuestion.user_id == user_id,
                SolvedQuestion.question_id == question_id
            ).one()
        except SQLAlchemyError as e:
            logger.error(f"Failed to record solved question: {str(e)}")
            db.rollback()
            raise StoreError("Failed to record solved question", detail=str(e)) from e

        logger.info(
            f"Solved recorded: user={user_id}, question={question_id}, "
            f"category={category}, correct={record.is_correct}"
        )

        return record

    def _upsert(self, db: Session, values: dict) -> None:
        """Single-statement upsert where the dialect supports ON CONFLICT"""

        dialect = db.get_bind().dialect.name

        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert
        elif dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert
        else:
            self._query_then_update(db, values)
            return

        stmt = insert(SolvedQuestion).values(id=generate_id(), **values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "question_id"],
            set_={
                "category": stmt.excluded.category,
                "is_correct": stmt.excluded.is_correct,
                "time_spent": stmt.excluded.time_spent,
                "solved_at": stmt.excluded.solved_at,
            }
        )
        db.execute(stmt)

    def _query_then_update(self, db: Session, values: dict) -> None:
        record = db.query(SolvedQuestion).filter(
            SolvedQuestion.user_id == values["user_id"],
            SolvedQuestion.question_id == values["question_id"]
        ).first()

        if not record:
            record = SolvedQuestion(
                user_id=values["user_id"],
                question_id=values["question_id"]
            )
            db.add(record)

        record.category = values["category"]
        record.is_correct = values["is_correct"]
        record.time_spent = values["time_spent"]
        record.solved_at = values["solved_at"]

    def purge_user(self, db: Session, user_id: str) -> int:
        """Delete every solved record of a user, returning the count"""
        require_fields({"userId": user_id})

        try:
            deleted = db.query(SolvedQuestion).filter(
                SolvedQuestion.user_id == user_id
            ).delete(synchronize_session=False)
            db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to purge solved questions for user {user_id}: {str(e)}")
            db.rollback()
            raise StoreError("Failed to purge solved questions", detail=str(e)) from e

        logger.info(f"Purged {deleted} solved records for user {user_id}")
        return deleted


# Global instance
progress_service = ProgressService()
