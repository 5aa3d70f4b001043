"""
Pydantic schemas for solved-question progress and statistics
"""
from pydantic import Field
from typing import List, Optional
from datetime import datetime

from app.schemas.base import CamelModel


class SolvedSubmission(CamelModel):
    """Answer submission for one question"""
    user_id: Optional[str] = None
    question_id: Optional[str] = None
    category: Optional[str] = Field(None, description="Looked up from the question when omitted")
    is_correct: Optional[bool] = None
    time_spent: Optional[float] = Field(None, description="Time spent in seconds")


class SolvedResponse(CamelModel):
    """Stored solved-question record"""
    id: str
    user_id: str
    question_id: str
    category: str
    is_correct: bool
    time_spent: Optional[float] = None
    solved_at: Optional[datetime] = None


class SolvedIdsResponse(CamelModel):
    """Ids of questions a user has answered"""
    user_id: str
    category: Optional[str] = None
    question_ids: List[str]


class CategoryStats(CamelModel):
    """Aggregates for one category"""
    category: str
    total_solved: int
    correct_count: int
    avg_time: Optional[float] = None


class UserStats(CamelModel):
    """Per-category statistics for a user"""
    user_id: str
    categories: List[CategoryStats]
