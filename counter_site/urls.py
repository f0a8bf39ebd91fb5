# counter_site/urls.py
from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='counter:counter', permanent=False), name='home'),
    path(settings.COUNTER_MOUNT_PATH, include('counter.urls')),
    path('api/', include('settings_data.urls')),
    path('admin/', admin.site.urls),
]
