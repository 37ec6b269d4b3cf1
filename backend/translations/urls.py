from django.urls import path

from .views import ResolvedTranslationView, TranslationListView

urlpatterns = [
    path(
        "translations/<str:app_label>/<str:model>/<int:pk>/",
        TranslationListView.as_view(),
        name="translation-list",
    ),
    path(
        "translations/<str:app_label>/<str:model>/<int:pk>/<str:locale>/",
        ResolvedTranslationView.as_view(),
        name="translation-resolved",
    ),
]
