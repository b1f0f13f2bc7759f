
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def school_class(db):
    from apps.domains.classes.models import SchoolClass
    return SchoolClass.objects.create(name="1반", school_id=10)


@pytest.fixture
def make_student(db, school_class):
    from django.contrib.auth import get_user_model
    from apps.domains.students.models import Student

    def _make(username, *, name=None, school_class_obj=school_class, status=Student.Status.ACTIVE):
        user = get_user_model().objects.create_user(username=username, password="pw-12345678")
        return Student.objects.create(
            user=user,
            name=name or username.title(),
            username=username,
            school_class=school_class_obj,
            status=status,
        )

    return _make


@pytest.fixture
def student(make_student):
    return make_student("kim")


@pytest.fixture
def make_db_quiz(db):
    """
    문항 points 목록으로 active quiz 생성.
    각 문항: 선택지 3개, 첫 번째가 정답.
    """
    from apps.domains.quizzes.models import Quiz, QuizQuestion, QuizOption

    def _make(points=(10, 10, 10, 10), *, passing_score=60.0, allow_retake=True, status=Quiz.Status.ACTIVE, topic_id=None):
        quiz = Quiz.objects.create(
            title="Fractions",
            passing_score=passing_score,
            allow_retake=allow_retake,
            status=status,
            topic_id=topic_id,
        )
        for i, p in enumerate(points):
            q = QuizQuestion.objects.create(quiz=quiz, question_text=f"Q{i + 1}", points=p, order_position=i)
            for j in range(3):
                QuizOption.objects.create(question=q, option_text=f"O{j}", is_correct=(j == 0), order_position=j)
        return quiz

    return _make


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def student_client(api_client, student):
    api_client.force_authenticate(user=student.user)
    return api_client


@pytest.fixture
def staff_client(db):
    from django.contrib.auth import get_user_model
    user = get_user_model().objects.create_user(username="teacher", password="pw-12345678", is_staff=True)
    client = APIClient()
    client.force_authenticate(user=user)
    return client

