"""
Read-only access to the question bank
"""
import logging
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import StoreError
from app.models import Question

logger = logging.getLogger(__name__)


class QuestionService:
    """Queries against the questions table. Absence is None, never an error."""

    def list_categories(self, db: Session) -> List[str]:
        try:
            rows = db.query(Question.category).distinct().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list question categories: {str(e)}")
            raise StoreError("Failed to list categories", detail=str(e)) from e
        return [row[0] for row in rows]

    def list_questions(self, db: Session) -> List[Question]:
        try:
            return db.query(Question).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list questions: {str(e)}")
            raise StoreError("Failed to list questions", detail=str(e)) from e

    def get_question(self, db: Session, question_id: str) -> Optional[Question]:
        try:
            return db.query(Question).filter(Question.id == question_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch question {question_id}: {str(e)}")
            raise StoreError("Failed to fetch question", detail=str(e)) from e

    def find_by_text(self, db: Session, text: str) -> Optional[Question]:
        """Exact match on the question text"""
        try:
            return db.query(Question).filter(Question.question == text).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up question by text: {str(e)}")
            raise StoreError("Failed to look up question", detail=str(e)) from e

    def find_by_category_excluding(
        self,
        db: Session,
        category: str,
        excluded_ids: Iterable[str] = ()
    ) -> List[Question]:
        """
        Questions in a category whose id is not in excluded_ids

        Args:
            db: Database session
            category: Category label
            excluded_ids: Question ids to leave out (empty = whole category)

        Returns:
            List of questions, unordered
        """
        excluded = list(excluded_ids)

        query = db.query(Question).filter(Question.category == category)
        if excluded:
            query = query.filter(Question.id.notin_(excluded))

        try:
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to query category {category}: {str(e)}")
            raise StoreError("Failed to query questions", detail=str(e)) from e


# Global instance
question_service = QuestionService()
