from django.contrib.contenttypes.models import ContentType
from django.http import Http404
from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .mixins import TranslatableModel
from .models import Translation
from .serializers import TranslationSerializer


class OwnerMixin:
    """Resolve the translatable record addressed by app_label/model/pk."""

    def get_owner(self, app_label, model, pk):
        try:
            content_type = ContentType.objects.get_by_natural_key(app_label, model)
        except ContentType.DoesNotExist:
            raise Http404("Unknown model")
        model_class = content_type.model_class()
        if model_class is None or not issubclass(model_class, TranslatableModel):
            raise Http404("Model is not translatable")
        return get_object_or_404(model_class, pk=pk)


class TranslationListView(OwnerMixin, APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, app_label, model, pk):
        owner = self.get_owner(app_label, model, pk)
        translations = Translation.objects.list_for_owner(owner)
        return Response(TranslationSerializer(translations, many=True).data)


class ResolvedTranslationView(OwnerMixin, APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, app_label, model, pk, locale):
        owner = self.get_owner(app_label, model, pk)
        owner.load_translations()
        values, errors = owner.resolve_translations(locale)
        return Response({"locale": locale, "values": values, "errors": errors})
