"""
Pydantic schemas for the question bank
"""
from typing import List

from app.schemas.base import CamelModel


class QuestionResponse(CamelModel):
    """A question including its correct answer index"""
    id: str
    category: str
    question: str
    options: List[str]
    answer: int


class QuestionByTextResponse(CamelModel):
    """Original question looked up by its text"""
    question: str
    options: List[str]
    answer: int
