# counter/views.py
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views import View

from .actions import ACTION_CHOICES, apply_action
from .services import counter_url, parse_count, resolve_count
import logging

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = 'counter/index.html'
FRAGMENT_TEMPLATE = 'counter/_counter.html'


def is_enhanced(request):
    """True when the request comes from an htmx swap rather than a full navigation."""
    return request.headers.get('HX-Request', '').lower() == 'true'


class CounterView(View):

    def base_path(self):
        # Resolves through whatever prefix the counter URLs were included under
        return reverse('counter:counter')

    def context(self, count):
        return {
            'count': count,
            'actions': ACTION_CHOICES,
            'counter_path': self.base_path(),
        }

    def get(self, request):
        count = resolve_count(parse_count(request.GET.get('count')))
        return render(request, PAGE_TEMPLATE, self.context(count))

    def post(self, request):
        count = parse_count(request.POST.get('count'), required=True)
        action = request.POST.get('action', '')

        result = apply_action(count, action)
        target = counter_url(self.base_path(), result.query_count)
        logger.info(f"Counter action {action!r} on {count} -> {target}")

        if not is_enhanced(request):
            return redirect(target)

        response = render(request, FRAGMENT_TEMPLATE, self.context(result.resolved_count()))
        response['HX-Push-Url'] = target
        return response
