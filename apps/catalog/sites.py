"""
Admin site for the shop.

Adds, on top of the stock admin:
- navigation ordering (``navigation_sort``) and labels (``navigation_label``)
  taken from each model admin
- a count badge next to models whose admin defines ``get_navigation_badge``
- a JSON global search endpoint over resources that declare
  ``globally_searchable_attributes``
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path
from django.utils.html import format_html

from .services import GlobalSearchService


class ShopAdminSite(admin.AdminSite):
    site_header = 'Shop Admin'
    site_title = 'Shop'
    index_title = 'Administration'

    def get_urls(self):
        urls = [
            path('search/', self.admin_view(self.global_search_view), name='global_search'),
        ]
        return urls + super().get_urls()

    def global_search_view(self, request):
        term = request.GET.get('q', '').strip()
        groups = GlobalSearchService.search(self, request, term) if term else []
        return JsonResponse({'query': term, 'groups': groups})

    def get_app_list(self, request, app_label=None):
        app_list = super().get_app_list(request, app_label)
        for app in app_list:
            for model_dict in app['models']:
                model_admin = self._registry.get(model_dict.get('model'))
                model_dict['navigation_sort'] = getattr(model_admin, 'navigation_sort', None)
                label = getattr(model_admin, 'navigation_label', None)
                if label:
                    model_dict['name'] = label
            app['models'].sort(key=lambda m: (
                m['navigation_sort'] is None,
                m['navigation_sort'] or 0,
                str(m['name']),
            ))
            for model_dict in app['models']:
                model_admin = self._registry.get(model_dict.get('model'))
                get_badge = getattr(model_admin, 'get_navigation_badge', None)
                badge = get_badge(request) if get_badge else None
                model_dict['badge'] = badge
                if badge is not None:
                    model_dict['name'] = format_html(
                        '{} <span class="badge">{}</span>', model_dict['name'], badge
                    )
        return app_list
