from django.utils.cache import add_never_cache_headers

from ..services import page_cache_kill_switch


class PageCacheKillSwitchMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        if page_cache_kill_switch.is_triggered(request):
            add_never_cache_headers(response)
            response["X-Page-Cache"] = "killed"
        return response
