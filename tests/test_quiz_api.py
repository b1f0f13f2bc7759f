import pytest

from tests.db_helpers import answers_for

pytestmark = pytest.mark.django_db

START = "/api/v1/results/quiz-attempts/start/"
SUBMIT = "/api/v1/results/quiz-attempts/submit/"


def _start(client, quiz):
    return client.post(START, {"quiz_id": quiz.id}, format="json")


def _submit(client, attempt_id, body_answers, **extra):
    payload = {"attempt_id": attempt_id, "answers": body_answers}
    payload.update(extra)
    return client.post(SUBMIT, payload, format="json")


class TestAttemptEndpoints:
    def test_start_and_submit(self, student_client, make_db_quiz):
        quiz = make_db_quiz(points=(10, 10, 10, 10))

        started = _start(student_client, quiz)
        assert started.status_code == 201
        assert started.data["status"] == "in_progress"
        assert started.data["max_score"] == 40

        res = _submit(student_client, started.data["id"], answers_for(quiz, 3), time_spent_seconds=30)

        assert res.status_code == 200
        body = res.data
        assert body["score"] == 30
        assert body["percentage"] == pytest.approx(75.0)
        assert body["passed"] is True
        assert body["correct_answers"] == 3
        assert body["total_questions"] == 4
        assert body["is_new_high_score"] is True
        assert body["points_earned"] == 30
        assert body["total_points"] == 30
        assert body["attempt"]["status"] == "completed"
        assert body["attempt"]["time_spent_seconds"] == 30
        assert body["answers"][3]["is_correct"] is False
        assert body["answers"][3]["correct_option_text"] == "O0"

    def test_resume_returns_same_attempt(self, student_client, make_db_quiz):
        quiz = make_db_quiz()

        first = _start(student_client, quiz)
        second = _start(student_client, quiz)

        assert first.data["id"] == second.data["id"]

    def test_double_submit_conflict(self, student_client, make_db_quiz):
        quiz = make_db_quiz()
        attempt_id = _start(student_client, quiz).data["id"]
        _submit(student_client, attempt_id, answers_for(quiz, 1))

        res = _submit(student_client, attempt_id, answers_for(quiz, 4))

        assert res.status_code == 409
        assert res.data["code"] == "already_submitted"
        assert res.data["retryable"] is False

    def test_inactive_quiz_conflict(self, student_client, make_db_quiz):
        quiz = make_db_quiz(status="draft")

        res = _start(student_client, quiz)

        assert res.status_code == 409
        assert res.data["code"] == "quiz_unavailable"

    def test_unknown_quiz(self, student_client):
        res = student_client.post(START, {"quiz_id": 987654}, format="json")

        assert res.status_code == 404
        assert res.data["code"] == "quiz_not_found"

    def test_retake_not_allowed(self, student_client, make_db_quiz):
        quiz = make_db_quiz(allow_retake=False)
        attempt_id = _start(student_client, quiz).data["id"]
        _submit(student_client, attempt_id, [])

        res = _start(student_client, quiz)

        assert res.status_code == 409
        assert res.data["code"] == "retake_not_allowed"

    def test_other_students_attempt_forbidden(self, student_client, make_student, make_db_quiz):
        from rest_framework.test import APIClient

        quiz = make_db_quiz()
        attempt_id = _start(student_client, quiz).data["id"]
        other = APIClient()
        other.force_authenticate(user=make_student("lee").user)

        submit = _submit(other, attempt_id, [])
        detail = other.get(f"/api/v1/results/quiz-attempts/{attempt_id}/")

        assert submit.status_code == 403
        assert submit.data["code"] == "forbidden"
        assert detail.status_code == 403

    def test_unknown_attempt(self, student_client):
        res = _submit(student_client, 555555, [])

        assert res.status_code == 404
        assert res.data["code"] == "attempt_not_found"

    def test_negative_time_spent_rejected(self, student_client, make_db_quiz):
        quiz = make_db_quiz()
        attempt_id = _start(student_client, quiz).data["id"]

        res = _submit(student_client, attempt_id, [], time_spent_seconds=-5)

        assert res.status_code == 400
        assert "time_spent_seconds" in res.data

    def test_requires_student_profile(self, staff_client, make_db_quiz):
        quiz = make_db_quiz()

        res = staff_client.post(START, {"quiz_id": quiz.id}, format="json")

        assert res.status_code == 403

    def test_requires_authentication(self, api_client, make_db_quiz):
        quiz = make_db_quiz()

        res = api_client.post(START, {"quiz_id": quiz.id}, format="json")

        assert res.status_code in (401, 403)

    def test_attempt_detail(self, student_client, make_db_quiz):
        quiz = make_db_quiz(points=(1, 1))
        attempt_id = _start(student_client, quiz).data["id"]
        _submit(student_client, attempt_id, answers_for(quiz, 1))

        res = student_client.get(f"/api/v1/results/quiz-attempts/{attempt_id}/")

        assert res.status_code == 200
        assert res.data["attempt"]["score"] == 1
        assert [a["is_correct"] for a in res.data["answers"]] == [True, False]


class TestMyProgressEndpoints:
    def test_points_default_zero(self, student_client, student):
        res = student_client.get("/api/v1/results/me/quiz-points/")

        assert res.status_code == 200
        assert res.data["total_points"] == 0
        assert res.data["student_id"] == student.id

    def test_scores_history_and_progress(self, student_client, make_db_quiz):
        quiz = make_db_quiz(points=(10, 10))
        for n in (1, 2):
            attempt_id = _start(student_client, quiz).data["id"]
            _submit(student_client, attempt_id, answers_for(quiz, n))

        scores = student_client.get("/api/v1/results/me/quiz-scores/")
        history = student_client.get(f"/api/v1/results/me/quiz-attempts/?quiz_id={quiz.id}")
        progress = student_client.get(f"/api/v1/results/me/quizzes/{quiz.id}/progress/")
        points = student_client.get("/api/v1/results/me/quiz-points/")

        assert scores.data[0]["best_score"] == 20
        assert scores.data[0]["attempts_count"] == 2
        assert scores.data[0]["quiz"]["total_points"] == 20
        assert len(history.data) == 2
        assert history.data[0]["quiz"]["title"] == "Fractions"
        assert progress.data["status"] == "passed"
        assert progress.data["can_retake"] is True
        assert points.data["total_points"] == 20
        assert points.data["quizzes_completed"] == 1

    def test_bad_quiz_id_filter(self, student_client):
        res = student_client.get("/api/v1/results/me/quiz-attempts/?quiz_id=abc")

        assert res.status_code == 400


class TestLeaderboardEndpoints:
    def _play(self, make_student, make_db_quiz, scores, **student_kwargs):
        from rest_framework.test import APIClient

        quiz = make_db_quiz(points=(10, 10, 10, 10))
        students = []
        for i, n in enumerate(scores):
            s = make_student(f"s{i}", **student_kwargs)
            client = APIClient()
            client.force_authenticate(user=s.user)
            attempt_id = _start(client, quiz).data["id"]
            _submit(client, attempt_id, answers_for(quiz, n))
            students.append(s)
        return students

    def test_global(self, student_client, make_student, make_db_quiz):
        s0, s1, s2 = self._play(make_student, make_db_quiz, [1, 3, 2])

        res = student_client.get("/api/v1/results/leaderboard/?limit=2")

        assert res.status_code == 200
        assert [(e["rank"], e["student"]["id"], e["total_points"]) for e in res.data] == [
            (1, s1.id, 30),
            (2, s2.id, 20),
        ]

    def test_limit_is_clamped(self, settings, student_client, make_student, make_db_quiz):
        settings.QUIZ_LEADERBOARD_MAX_LIMIT = 2
        self._play(make_student, make_db_quiz, [1, 2, 3])

        too_big = student_client.get("/api/v1/results/leaderboard/?limit=500")
        too_small = student_client.get("/api/v1/results/leaderboard/?limit=0")

        assert len(too_big.data) == 2
        assert len(too_small.data) == 1

    def test_class(self, student_client, make_student, make_db_quiz, school_class):
        from apps.domains.classes.models import SchoolClass
        from apps.domains.results.models import StudentTotalPoints

        other_class = SchoolClass.objects.create(name="2반")
        mine = self._play(make_student, make_db_quiz, [2])
        outsider = make_student("outsider", school_class_obj=other_class)
        StudentTotalPoints.objects.create(student=outsider, total_points=999, quizzes_completed=1)

        res = student_client.get(f"/api/v1/results/leaderboard/classes/{school_class.id}/")
        empty = student_client.get(f"/api/v1/results/leaderboard/classes/{other_class.id + 100}/")

        assert [e["student"]["id"] for e in res.data] == [mine[0].id]
        assert empty.status_code == 200
        assert empty.data == []


class TestStudentQuizEndpoint:
    def test_hides_answers(self, student_client, make_db_quiz):
        quiz = make_db_quiz(points=(1, 2))

        res = student_client.get(f"/api/v1/quizzes/student/{quiz.id}/?shuffle=true")

        assert res.status_code == 200
        assert res.data["total_points"] == 3
        for q in res.data["questions"]:
            assert all("is_correct" not in o for o in q["options"])

    def test_draft_quiz_not_found(self, student_client, make_db_quiz):
        quiz = make_db_quiz(status="draft")

        res = student_client.get(f"/api/v1/quizzes/student/{quiz.id}/")

        assert res.status_code == 404
        assert res.data["code"] == "quiz_not_found"


class TestHealth:
    def test_ok(self, client):
        res = client.get("/health/")

        assert res.status_code == 200
        assert res.json()["database"] == "connected"


class TestLedgerFailure:
    def test_returns_retryable_503(self, student_client, make_db_quiz, monkeypatch):
        from django.db import DatabaseError
        from apps.domains.results.models import QuizBestScore

        quiz = make_db_quiz()
        attempt_id = _start(student_client, quiz).data["id"]

        def boom(**kwargs):
            raise DatabaseError("connection reset")

        monkeypatch.setattr(QuizBestScore.objects, "create", boom)

        res = _submit(student_client, attempt_id, answers_for(quiz, 2))

        assert res.status_code == 503
        assert res.data["code"] == "ledger_update_failed"
        assert res.data["retryable"] is True
        assert res["Retry-After"] == "1"

        monkeypatch.undo()
        retry = _submit(student_client, attempt_id, answers_for(quiz, 2))
        assert retry.status_code == 200
        assert retry.data["total_points"] == 20


class TestAdminQuizPerformance:
    URL = "/api/v1/results/admin/quiz-performance/"

    def test_staff_report(self, staff_client, student_client, make_db_quiz):
        quiz = make_db_quiz(points=(10, 10, 10, 10))
        attempt_id = _start(student_client, quiz).data["id"]
        _submit(student_client, attempt_id, answers_for(quiz, 4))

        res = staff_client.get(self.URL, {"quiz_id": quiz.id})

        assert res.status_code == 200
        assert res.data["stats"]["completed_attempts"] == 1
        assert res.data["stats"]["score_categories"]["exceeding"] == 1
        assert res.data["quiz_data"][0]["quiz_id"] == quiz.id
        assert res.data["student_data"][0]["total_points"] == 40

    def test_student_forbidden(self, student_client):
        res = student_client.get(self.URL)

        assert res.status_code == 403

    def test_non_staff_user_forbidden(self, db):
        from django.contrib.auth import get_user_model
        from rest_framework.test import APIClient

        user = get_user_model().objects.create_user(username="tutor", password="pw-12345678")
        client = APIClient()
        client.force_authenticate(user=user)

        assert client.get(self.URL).status_code == 403

    def test_superuser_allowed(self, db):
        from django.contrib.auth import get_user_model
        from rest_framework.test import APIClient

        user = get_user_model().objects.create_superuser(username="root", password="pw-12345678")
        client = APIClient()
        client.force_authenticate(user=user)

        assert client.get(self.URL).status_code == 200

    def test_invalid_status(self, staff_client):
        res = staff_client.get(self.URL, {"status": "bogus"})

        assert res.status_code == 400
        assert "status" in res.data
