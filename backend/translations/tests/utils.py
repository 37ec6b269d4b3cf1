from django.test import TestCase
from django.utils import translation


class BaseTestCase(TestCase):
    """Base test case running in the default locale"""

    def setUp(self):
        super().setUp()
        translation.activate("en")
        self.addCleanup(translation.deactivate)


class TranslationAssertions:
    """Assertion helpers for stored translations"""

    def assertTranslationStored(self, owner, field, locale, value):
        from translations.models import Translation

        translation_row = Translation.objects.find(owner, field, locale)
        self.assertIsNotNone(translation_row, f"No {field}/{locale} translation stored for {owner!r}")
        self.assertEqual(translation_row.value, value)

    def assertNoTranslations(self, owner):
        from translations.models import Translation

        self.assertEqual(Translation.objects.for_owner(owner).count(), 0)
