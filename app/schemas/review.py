"""
Pydantic schemas for the wrong-answer review list
"""
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel


class WrongAnswerCreate(CamelModel):
    """
    Wrong answer submission. Every field is required, but presence is
    checked by the service so that correctIndex=0 stays valid.
    """
    user_id: Optional[str] = None
    category: Optional[str] = None
    question: Optional[str] = None
    correct_answer: Optional[str] = None
    user_answer: Optional[str] = None
    correct_index: Optional[int] = None


class WrongAnswerResponse(CamelModel):
    """Stored wrong-answer record"""
    id: str
    user_id: str
    category: str
    question: str
    correct_answer: str
    user_answer: str
    correct_index: int
    created_at: Optional[datetime] = None


class WrongAnswerSaved(CamelModel):
    """Response after saving a wrong answer"""
    success: bool = True
    message: str
    id: str
    deleted_count: int


class DeleteResponse(CamelModel):
    """Response for delete operations"""
    success: bool = True
    message: str
    deleted_count: Optional[int] = None
