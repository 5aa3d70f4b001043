"""
Review list (wrong-answer note) management
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import NotFound, StoreError
from app.models import WrongAnswer
from app.utils.validation import require_fields

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Service for a user's wrong-answer records

    Keeps at most one record per (user_id, question) by deleting older
    rows before every insert. The delete and the insert are separate
    commits, so two concurrent saves for the same pair may leave a duplicate.
    """

    def save_wrong_answer(
        self,
        db: Session,
        user_id: str,
        category: str,
        question: str,
        correct_answer: str,
        user_answer: str,
        correct_index: Optional[int]
    ) -> Tuple[WrongAnswer, int]:
        """
        Replace the user's record for this question with a fresh one

        Args:
            db: Database session
            user_id: Opaque user identifier
            category: Question category
            question: Question text
            correct_answer: Text of the correct option
            user_answer: Text of the option the user picked
            correct_index: Index of the correct option (0 is valid)

        Returns:
            Tuple of (new record, number of older records deleted)

        Records returned by an earlier save for the same pair are deleted
        here and must not be read from the session afterwards.
        """
        require_fields({
            "userId": user_id,
            "category": category,
            "question": question,
            "correctAnswer": correct_answer,
            "userAnswer": user_answer,
            "correctIndex": correct_index,
        })

        logger.info(
            f"Saving wrong answer: user={user_id}, category={category}, "
            f"question={question[:50]}..., correct_index={correct_index}"
        )

        deleted_count = 0
        try:
            deleted_count = db.query(WrongAnswer).filter(
                WrongAnswer.user_id == user_id,
                WrongAnswer.question == question
            ).delete(synchronize_session=False)
            db.commit()
            logger.info(f"Deleted {deleted_count} earlier records for the same question")
        except SQLAlchemyError as e:
            # The insert below is still attempted
            logger.error(f"Failed to delete earlier wrong answers: {str(e)}")
            db.rollback()

        record = WrongAnswer(
            user_id=user_id,
            category=category,
            question=question,
            correct_answer=correct_answer,
            user_answer=user_answer,
            correct_index=correct_index,
            created_at=datetime.now(timezone.utc)
        )

        try:
            db.add(record)
            db.commit()
            db.refresh(record)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save wrong answer: {str(e)}")
            db.rollback()
            raise StoreError("Failed to save wrong answer", detail=str(e)) from e

        logger.info(f"Wrong answer saved: {record.id}")

        return record, deleted_count

    def list_categories(self, db: Session, user_id: str) -> List[str]:
        """Distinct categories among the user's records"""
        try:
            rows = db.query(WrongAnswer.category).filter(
                WrongAnswer.user_id == user_id
            ).distinct().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list wrong-answer categories: {str(e)}")
            raise StoreError("Failed to list wrong-answer categories", detail=str(e)) from e
        return [row[0] for row in rows]

    def list_by_category(self, db: Session, user_id: str, category: str) -> List[WrongAnswer]:
        try:
            return db.query(WrongAnswer).filter(
                WrongAnswer.user_id == user_id,
                WrongAnswer.category == category
            ).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list wrong answers: {str(e)}")
            raise StoreError("Failed to list wrong answers", detail=str(e)) from e

    def delete_one(self, db: Session, record_id: str) -> None:
        """
        Delete a single record

        Raises:
            NotFound: no record has this id
        """
        try:
            deleted = db.query(WrongAnswer).filter(
                WrongAnswer.id == record_id
            ).delete(synchronize_session=False)
            db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete wrong answer {record_id}: {str(e)}")
            db.rollback()
            raise StoreError("Failed to delete wrong answer", detail=str(e)) from e

        if not deleted:
            raise NotFound("Wrong answer not found")

        logger.info(f"Wrong answer deleted: {record_id}")

    def purge_user(self, db: Session, user_id: str) -> int:
        """Delete all of a user's records. Safe to repeat."""
        require_fields({"userId": user_id})

        try:
            deleted = db.query(WrongAnswer).filter(
                WrongAnswer.user_id == user_id
            ).delete(synchronize_session=False)
            db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to purge wrong answers for user {user_id}: {str(e)}")
            db.rollback()
            raise StoreError("Failed to purge wrong answers", detail=str(e)) from e

        logger.info(f"Purged {deleted} wrong answers for user {user_id}")
        return deleted


# Global instance
review_service = ReviewService()
