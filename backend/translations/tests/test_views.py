from django.contrib.auth import get_user_model
from django.test import SimpleTestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from core.exceptions import custom_exception_handler
from posts.factories import PostFactory
from posts.models import Post
from translations.exceptions import CoercionError, NotTranslatableError, StoreUnavailableError
from translations.models import Translation
from .utils import BaseTestCase

User = get_user_model()


class TranslationViewTests(BaseTestCase):

    def setUp(self):
        super().setUp()
        self.client = APIClient()
        self.user = User.objects.create_user(username="editor", password="testpass123")
        self.client.force_authenticate(user=self.user)
        self.post = PostFactory(title="Original Title")
        self.post.set_translation("title", "es", "Título en Español")
        self.post.set_translation("view_count", "es", 5)

    def list_url(self, pk=None, model="post"):
        return reverse("translation-list", args=["posts", model, pk or self.post.pk])

    def resolved_url(self, locale, pk=None):
        return reverse("translation-resolved", args=["posts", "post", pk or self.post.pk, locale])

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        response = self.client.get(self.list_url())
        self.assertIn(response.status_code, [status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN])

    def test_list_stored_translations(self):
        response = self.client.get(self.list_url())

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            sorted((item["field"], item["locale"], item["value"]) for item in response.data),
            [("title", "es", "Título en Español"), ("view_count", "es", "5")],
        )

    def test_resolved_values(self):
        response = self.client.get(self.resolved_url("es"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["locale"], "es")
        self.assertEqual(response.data["values"]["title"], "Título en Español")
        self.assertEqual(response.data["values"]["view_count"], 5)
        self.assertEqual(response.data["errors"], {})

    def test_resolved_values_fall_back(self):
        response = self.client.get(self.resolved_url("fr"))

        self.assertEqual(response.data["values"]["title"], "Original Title")
        self.assertEqual(response.data["values"]["view_count"], 0)

    def test_resolved_values_report_errors(self):
        Translation.objects.upsert(self.post, "is_published", "es", "perhaps")

        response = self.client.get(self.resolved_url("es"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("is_published", response.data["errors"])
        self.assertEqual(response.data["values"]["title"], "Título en Español")

    def test_unknown_owner(self):
        response = self.client.get(self.list_url(pk=self.post.pk + 1000))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_unknown_model(self):
        response = self.client.get(self.list_url(model="comment"))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_non_translatable_model(self):
        url = reverse("translation-list", args=["auth", "user", self.user.pk])
        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class ExceptionHandlerTests(SimpleTestCase):

    def test_not_translatable(self):
        response = custom_exception_handler(NotTranslatableError(Post, "slug"), {})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("slug", response.data["detail"])

    def test_coercion_error(self):
        exc = CoercionError("view_count", "es", "lots", "integer")
        response = custom_exception_handler(exc, {})
        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data["field"], "view_count")
        self.assertEqual(response.data["locale"], "es")

    def test_store_unavailable(self):
        response = custom_exception_handler(StoreUnavailableError("down"), {})
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)

    def test_unhandled_error(self):
        response = custom_exception_handler(RuntimeError("boom"), {})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
