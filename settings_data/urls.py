from rest_framework.routers import DefaultRouter
from .views import SettingsIntViewSet

router = DefaultRouter()
router.register('settings', SettingsIntViewSet, basename='settings-int')

urlpatterns = router.urls
