from rest_framework import mixins, viewsets

from .models import SettingsInt
from .serializers import SettingsIntSerializer
import logging

logger = logging.getLogger(__name__)


class SettingsIntViewSet(mixins.ListModelMixin,
                         mixins.RetrieveModelMixin,
                         mixins.UpdateModelMixin,
                         viewsets.GenericViewSet):
    """Read and overwrite integer settings. Rows are created by migrations only."""
    queryset = SettingsInt.objects.all()
    serializer_class = SettingsIntSerializer
    lookup_field = 'name'

    def perform_update(self, serializer):
        instance = serializer.save()
        logger.info(f"Setting {instance.name} updated to {instance.value}")
