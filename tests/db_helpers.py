"""DB 모델 기반 테스트 헬퍼."""


def answers_for(quiz, n_correct):
    """앞에서 n_correct 문항은 정답, 나머지는 오답 (API 요청 body 형식)."""
    out = []
    for i, q in enumerate(quiz.questions.filter(status="active").order_by("order_position", "id")):
        options = list(q.options.order_by("order_position", "id"))
        chosen = options[0] if i < n_correct else options[1]
        out.append({"question_id": q.id, "selected_option_id": chosen.id})
    return out
