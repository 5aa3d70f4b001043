"""
Question bank API endpoints
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.config import settings
from app.database import get_db
from app.exceptions import NotFound
from app.schemas.question import QuestionResponse, QuestionByTextResponse
from app.services.question_service import question_service
from app.services.progress_service import progress_service
from app.utils.validation import require_fields

router = APIRouter(prefix="/api", tags=["questions"])
logger = logging.getLogger(__name__)


@router.get("/questions", response_model=List[QuestionResponse])
def list_questions(db: Session = Depends(get_db)):
    """Return every question in the bank"""
    return question_service.list_questions(db)


@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    """Return the distinct question categories"""
    return question_service.list_categories(db)


@router.get("/question-by-text", response_model=QuestionByTextResponse)
def get_question_by_text(
    question: Optional[str] = Query(None, description="Exact question text"),
    db: Session = Depends(get_db)
):
    """
    Look up the original question for a review-list entry

    Returns the question text, its options and the answer index
    """
    require_fields({"question": question})

    found = question_service.find_by_text(db, question)
    if not found:
        raise NotFound("Question not found")

    return QuestionByTextResponse(
        question=found.question,
        options=found.options,
        answer=found.answer
    )


@router.get("/questions/unsolved", response_model=List[QuestionResponse])
def get_unsolved_questions(
    user_id: Optional[str] = Query(None, alias="userId"),
    category: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, le=settings.MAX_QUESTION_LIMIT, description="Batch size, default 10"),
    db: Session = Depends(get_db)
):
    """
    Get a shuffled batch of questions the user has not solved yet

    - Prefers questions the user has never answered
    - Tops up with already-solved questions when the category runs short
    """
    logger.info(f"Selecting unsolved questions: user={user_id}, category={category}, limit={limit}")

    return progress_service.select_unsolved(db, user_id, category, limit)
