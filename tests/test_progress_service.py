import pytest

from app.exceptions import StoreError, ValidationError
from app.models import Question, SolvedQuestion
from app.services.progress_service import progress_service


def category_ids(db, category):
    return [q.id for q in db.query(Question).filter(Question.category == category).all()]


class TestSelectUnsolved:
    def test_default_limit(self, seeded):
        selected = progress_service.select_unsolved(seeded, "u1", "math")
        assert len(selected) == 10

    def test_excludes_solved_when_pool_suffices(self, seeded):
        ids = category_ids(seeded, "math")
        solved = ids[:2]
        for question_id in solved:
            progress_service.record_solved(seeded, "u1", question_id, "math", True, 3)

        for _ in range(5):
            selected = progress_service.select_unsolved(seeded, "u1", "math", 10)
            assert len(selected) == 10
            assert not {q.id for q in selected} & set(solved)

    def test_tops_up_with_solved_questions(self, seeded):
        ids = category_ids(seeded, "math")
        for question_id in ids[:8]:
            progress_service.record_solved(seeded, "u1", question_id, "math", False)

        selected = progress_service.select_unsolved(seeded, "u1", "math", 10)
        selected_ids = [q.id for q in selected]

        assert len(selected_ids) == 10
        assert len(set(selected_ids)) == 10
        assert set(ids[8:]) <= set(selected_ids)

    def test_small_category_returns_everything_once(self, seeded):
        ids = category_ids(seeded, "science")
        progress_service.record_solved(seeded, "u1", ids[0], "science", True)

        selected = progress_service.select_unsolved(seeded, "u1", "science", 10)

        assert sorted(q.id for q in selected) == sorted(ids)

    def test_fully_solved_small_category_returns_everything_once(self, seeded):
        ids = category_ids(seeded, "science")
        for question_id in ids:
            progress_service.record_solved(seeded, "u1", question_id, "science", True)

        selected = progress_service.select_unsolved(seeded, "u1", "science", 10)

        assert len(selected) == 3
        assert sorted(q.id for q in selected) == sorted(ids)

    def test_order_varies_between_calls(self, seeded):
        orderings = {
            tuple(q.id for q in progress_service.select_unsolved(seeded, "u1", "math", 12))
            for _ in range(20)
        }

        assert len(orderings) > 1
        for ordering in orderings:
            assert sorted(ordering) == sorted(category_ids(seeded, "math"))

    def test_other_users_progress_is_ignored(self, seeded):
        for question_id in category_ids(seeded, "science"):
            progress_service.record_solved(seeded, "u2", question_id, "science", True)

        selected = progress_service.select_unsolved(seeded, "u1", "science", 2)
        assert len(selected) == 2

    def test_unknown_category(self, seeded):
        assert progress_service.select_unsolved(seeded, "u1", "history", 5) == []

    def test_rejects_non_positive_limit(self, seeded):
        with pytest.raises(ValidationError):
            progress_service.select_unsolved(seeded, "u1", "math", 0)

    def test_requires_user_and_category(self, seeded):
        with pytest.raises(ValidationError):
            progress_service.select_unsolved(seeded, "", "math", 5)
        with pytest.raises(ValidationError):
            progress_service.select_unsolved(seeded, "u1", None, 5)


class TestRecordSolved:
    def test_upsert_keeps_one_record(self, seeded):
        question_id = category_ids(seeded, "math")[0]

        first = progress_service.record_solved(seeded, "u1", question_id, "math", True, 12)
        second = progress_service.record_solved(seeded, "u1", question_id, "math", False, 5)

        records = seeded.query(SolvedQuestion).filter(
            SolvedQuestion.user_id == "u1",
            SolvedQuestion.question_id == question_id
        ).all()
        assert len(records) == 1
        assert records[0].is_correct is False
        assert records[0].time_spent == 5
        assert first.id == second.id

    def test_false_is_a_valid_answer(self, seeded):
        record = progress_service.record_solved(seeded, "u1", "q-1", "math", False)
        assert record.is_correct is False
        assert record.time_spent is None

    def test_missing_is_correct(self, seeded):
        with pytest.raises(ValidationError, match="isCorrect"):
            progress_service.record_solved(seeded, "u1", "q-1", "math", None)

    def test_negative_time_spent(self, seeded):
        with pytest.raises(ValidationError):
            progress_service.record_solved(seeded, "u1", "q-1", "math", True, -1)

    def test_solved_question_ids_by_category(self, seeded):
        progress_service.record_solved(seeded, "u1", "q-1", "math", True)
        progress_service.record_solved(seeded, "u1", "q-2", "science", True)

        assert progress_service.solved_question_ids(seeded, "u1", "math") == ["q-1"]
        assert sorted(progress_service.solved_question_ids(seeded, "u1")) == ["q-1", "q-2"]

    def test_purge_user(self, seeded):
        progress_service.record_solved(seeded, "u1", "q-1", "math", True)
        progress_service.record_solved(seeded, "u2", "q-1", "math", True)

        assert progress_service.purge_user(seeded, "u1") == 1
        assert progress_service.purge_user(seeded, "u1") == 0
        assert progress_service.solved_question_ids(seeded, "u2") == ["q-1"]

    def test_store_failure(self, seeded, monkeypatch):
        from sqlalchemy.exc import OperationalError

        def fail(*args, **kwargs):
            raise OperationalError("INSERT", {}, Exception("database is locked"))

        monkeypatch.setattr(seeded, "execute", fail)

        with pytest.raises(StoreError):
            progress_service.record_solved(seeded, "u1", "q-1", "math", True)
