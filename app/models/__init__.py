"""
Database models package
"""
from app.models.question import Question
from app.models.wrong_answer import WrongAnswer
from app.models.solved_question import SolvedQuestion

__all__ = ["Question", "WrongAnswer", "SolvedQuestion"]
