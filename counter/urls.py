from django.urls import path
from .views import CounterView

app_name = 'counter'

urlpatterns = [
    path('counter', CounterView.as_view(), name='counter'),
]
