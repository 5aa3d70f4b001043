"""
Load questions into the question bank from a JSON file

Usage:
    python -m app.seed questions.json
"""
import argparse
import json
import logging
from typing import Any, Dict, Iterable

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database import SessionLocal, init_db
from app.exceptions import StoreError, ValidationError
from app.models import Question

logger = logging.getLogger(__name__)

OPTION_COUNT = 4


def validate_question(item: Dict[str, Any]) -> None:
    for field in ("category", "question", "options", "answer"):
        if item.get(field) is None:
            raise ValidationError(f"Question is missing '{field}'")

    for field in ("category", "question"):
        if not isinstance(item[field], str) or not item[field].strip():
            raise ValidationError(f"Question '{field}' must be a non-empty string")

    options = item["options"]
    if not isinstance(options, list) or len(options) != OPTION_COUNT:
        raise ValidationError(f"Question must have exactly {OPTION_COUNT} options: {item['question'][:50]}")

    answer = item["answer"]
    if isinstance(answer, bool) or not isinstance(answer, int) or not 0 <= answer < OPTION_COUNT:
        raise ValidationError(f"Answer index out of range: {item['question'][:50]}")


def seed_questions(db: Session, items: Iterable[Dict[str, Any]]) -> int:
    """
    Insert questions whose text is not in the bank yet

    Returns:
        Number of questions inserted
    """
    items = list(items)
    for item in items:
        validate_question(item)

    try:
        existing = {row[0] for row in db.query(Question.question).all()}

        created = 0
        for item in items:
            if item["question"] in existing:
                logger.info(f"Skipping existing question: {item['question'][:50]}")
                continue

            db.add(Question(
                category=item["category"],
                question=item["question"],
                options=list(item["options"]),
                answer=item["answer"]
            ))
            existing.add(item["question"])
            created += 1

        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Failed to seed questions: {str(e)}")
        db.rollback()
        raise StoreError("Failed to seed questions", detail=str(e)) from e

    logger.info(f"Seeded {created} questions")
    return created


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the question bank")
    parser.add_argument("path", help="JSON file holding a list of questions")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    with open(args.path, encoding="utf-8") as f:
        items = json.load(f)

    init_db()
    db = SessionLocal()
    try:
        seed_questions(db, items)
    finally:
        db.close()


if __name__ == "__main__":
    main()
