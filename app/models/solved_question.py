"""
SolvedQuestion model - which questions a user has answered
"""
from sqlalchemy import Column, String, Boolean, Float, DateTime, UniqueConstraint, Index, func
from app.database import Base
from app.models.question import generate_id


class SolvedQuestion(Base):
    """
    Solved questions table - one row per (user_id, question_id), upserted
    on every submission. question_id is not a foreign key.
    """
    __tablename__ = "solved_questions"
    __table_args__ = (
        UniqueConstraint("user_id", "question_id", name="uq_solved_user_question"),
        Index("ix_solved_user_category", "user_id", "category"),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(255), nullable=False)
    question_id = Column(String(36), nullable=False)
    category = Column(String(100), nullable=False)
    is_correct = Column(Boolean, nullable=False)
    solved_at = Column(DateTime(timezone=True), server_default=func.now())
    time_spent = Column(Float)  # seconds

    def __repr__(self):
        return f"<SolvedQuestion(user_id={self.user_id}, question_id={self.question_id}, correct={self.is_correct})>"
