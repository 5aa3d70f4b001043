"""
Wrong-answer review list API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
import logging

from app.database import get_db
from app.schemas.review import (
    WrongAnswerCreate, WrongAnswerResponse, WrongAnswerSaved, DeleteResponse
)
from app.services.review_service import review_service

router = APIRouter(prefix="/api/wrong-answers", tags=["wrong-answers"])
logger = logging.getLogger(__name__)


@router.post("/save", response_model=WrongAnswerSaved)
def save_wrong_answer(
    payload: WrongAnswerCreate,
    db: Session = Depends(get_db)
):
    """
    Save a wrong answer to the user's review list

    Any earlier record for the same question is replaced.
    """
    record, deleted_count = review_service.save_wrong_answer(
        db,
        user_id=payload.user_id,
        category=payload.category,
        question=payload.question,
        correct_answer=payload.correct_answer,
        user_answer=payload.user_answer,
        correct_index=payload.correct_index
    )

    return WrongAnswerSaved(
        message="Wrong answer saved",
        id=record.id,
        deleted_count=deleted_count
    )


@router.get("/categories/{user_id}", response_model=List[str])
def list_wrong_answer_categories(user_id: str, db: Session = Depends(get_db)):
    """Categories that have at least one wrong answer for the user"""
    return review_service.list_categories(db, user_id)


@router.delete("/user/{user_id}", response_model=DeleteResponse)
def purge_user_wrong_answers(user_id: str, db: Session = Depends(get_db)):
    """Remove the user's whole review list"""
    deleted = review_service.purge_user(db, user_id)

    return DeleteResponse(
        message=f"Deleted {deleted} wrong answers",
        deleted_count=deleted
    )


@router.get("/{user_id}/{category}", response_model=List[WrongAnswerResponse])
def list_wrong_answers(user_id: str, category: str, db: Session = Depends(get_db)):
    """Wrong answers of the user within one category"""
    return review_service.list_by_category(db, user_id, category)


@router.delete("/{wrong_answer_id}", response_model=DeleteResponse)
def delete_wrong_answer(wrong_answer_id: str, db: Session = Depends(get_db)):
    """Delete one wrong answer; 404 when it does not exist"""
    review_service.delete_one(db, wrong_answer_id)

    return DeleteResponse(message="Wrong answer deleted")
