"""
Solved-question progress API endpoints
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
import logging

from app.database import get_db
from app.exceptions import NotFound
from app.schemas.progress import SolvedSubmission, SolvedResponse, SolvedIdsResponse
from app.services.question_service import question_service
from app.services.progress_service import progress_service

router = APIRouter(prefix="/api/progress", tags=["progress"])
logger = logging.getLogger(__name__)


@router.post("/solved", response_model=SolvedResponse)
def record_solved(
    submission: SolvedSubmission,
    db: Session = Depends(get_db)
):
    """
    Record that a user answered a question

    Repeated submissions for the same question overwrite the earlier
    result. The category is taken from the question when not supplied.
    """
    category = submission.category
    if not category and submission.question_id:
        question = question_service.get_question(db, submission.question_id)
        if not question:
            raise NotFound("Question not found")
        category = question.category

    return progress_service.record_solved(
        db,
        user_id=submission.user_id,
        question_id=submission.question_id,
        category=category,
        is_correct=submission.is_correct,
        time_spent=submission.time_spent
    )


@router.get("/{user_id}/solved", response_model=SolvedIdsResponse)
def get_solved_question_ids(
    user_id: str,
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """List the ids of questions a user has answered"""
    question_ids = progress_service.solved_question_ids(db, user_id, category)

    return SolvedIdsResponse(
        user_id=user_id,
        category=category,
        question_ids=question_ids
    )
