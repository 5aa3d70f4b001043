import pytest

from app.exceptions import ValidationError
from app.models import Question
from app.seed import seed_questions
from tests.conftest import make_questions


class TestSeedQuestions:
    def test_inserts_questions(self, db):
        assert seed_questions(db, make_questions("math", 3)) == 3
        assert db.query(Question).count() == 3

    def test_skips_existing_text(self, db):
        seed_questions(db, make_questions("math", 3))

        assert seed_questions(db, make_questions("math", 5)) == 2
        assert db.query(Question).count() == 5

    def test_rejects_wrong_option_count(self, db):
        item = make_questions("math", 1)[0]
        item["options"] = ["a", "b", "c"]

        with pytest.raises(ValidationError, match="4 options"):
            seed_questions(db, [item])
        assert db.query(Question).count() == 0

    def test_rejects_answer_out_of_range(self, db):
        item = make_questions("math", 1)[0]
        item["answer"] = 4

        with pytest.raises(ValidationError, match="out of range"):
            seed_questions(db, [item])

    def test_rejects_boolean_answer(self, db):
        item = make_questions("math", 1)[0]
        item["answer"] = True

        with pytest.raises(ValidationError, match="out of range"):
            seed_questions(db, [item])
        assert db.query(Question).count() == 0

    def test_rejects_non_string_question(self, db):
        item = make_questions("math", 1)[0]
        item["question"] = 42

        with pytest.raises(ValidationError, match="'question' must be a non-empty string"):
            seed_questions(db, [item])

    def test_rejects_non_string_category(self, db):
        item = make_questions("math", 1)[0]
        item["category"] = ["math"]

        with pytest.raises(ValidationError, match="'category' must be a non-empty string"):
            seed_questions(db, [item])
