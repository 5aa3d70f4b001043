"""
Question model - the read-only question bank
"""
from sqlalchemy import Column, String, Integer, Text, JSON
from sqlalchemy.dialects.postgresql import JSONB
from app.database import Base
import uuid


def generate_id() -> str:
    return str(uuid.uuid4())


class Question(Base):
    """
    Questions table - multiple choice questions grouped by category
    """
    __tablename__ = "questions"

    id = Column(String(36), primary_key=True, default=generate_id)
    category = Column(String(100), nullable=False, index=True)
    question = Column(Text, nullable=False, index=True)
    options = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False)  # ["A", "B", "C", "D"]
    answer = Column(Integer, nullable=False)  # 0-based index into options

    def __repr__(self):
        return f"<Question(id={self.id}, category={self.category})>"
