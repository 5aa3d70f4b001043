"""
WrongAnswer model - per-user review list of missed questions
"""
from sqlalchemy import Column, String, Integer, Text, DateTime, func
from app.database import Base
from app.models.question import generate_id


class WrongAnswer(Base):
    """
    Wrong answers table - at most one row per (user_id, question),
    kept by deleting older rows before each insert
    """
    __tablename__ = "wrong_answers"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(255), nullable=False, index=True)
    category = Column(String(100), nullable=False)
    question = Column(Text, nullable=False)
    correct_answer = Column(Text, nullable=False)
    user_answer = Column(Text, nullable=False)
    correct_index = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<WrongAnswer(id={self.id}, user_id={self.user_id}, category={self.category})>"
