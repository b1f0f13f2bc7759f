# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Domain APIs
    # =========================
    path("quizzes/", include("apps.domains.quizzes.urls")),
    path("results/", include("apps.domains.results.urls")),
]
