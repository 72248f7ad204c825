"""
Global search across the admin resources.

A model admin takes part by declaring ``globally_searchable_attributes``
(dotted paths such as ``brand.name`` for related fields). Optional hooks:
``record_title_attribute``, ``get_global_search_result_details(obj)``,
``get_global_search_result_url(obj)`` and ``global_search_results_limit``.
"""

import operator
from functools import reduce
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.contrib.admin.utils import quote
from django.db.models import Q
from django.urls import NoReverseMatch, reverse
from django.utils.text import smart_split, unescape_string_literal


class GlobalSearchService:

    @staticmethod
    def to_lookup(attribute: str) -> str:
        """'brand.name' -> 'brand__name'"""
        return attribute.replace('.', '__')

    @classmethod
    def build_query(cls, attributes: List[str], term: str) -> Q:
        """
        Every word of ``term`` must match at least one attribute
        (case-insensitive containment). Quoted phrases count as one word.
        """
        lookups = [f'{cls.to_lookup(attr)}__icontains' for attr in attributes]
        query = Q()
        for bit in smart_split(term):
            if bit.startswith(('"', "'")) and bit[0] == bit[-1]:
                bit = unescape_string_literal(bit)
            query &= reduce(operator.or_, (Q(**{lookup: bit}) for lookup in lookups))
        return query

    @staticmethod
    def format_details(details: Dict[str, Any]) -> Dict[str, str]:
        return {
            label: '' if value is None else str(value)
            for label, value in details.items()
        }

    @classmethod
    def search_model_admin(
        cls,
        model_admin,
        request,
        term: str,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Search the records of one admin resource.

        Returns a list of hits: {'title', 'url', 'details'}.
        """
        attributes = list(getattr(model_admin, 'globally_searchable_attributes', None) or [])
        if not attributes or not term.strip():
            return []
        if not model_admin.has_view_permission(request):
            return []

        if limit is None:
            limit = getattr(model_admin, 'global_search_results_limit', None) or settings.GLOBAL_SEARCH_RESULTS_LIMIT

        related = sorted({
            cls.to_lookup(attr.rsplit('.', 1)[0]) for attr in attributes if '.' in attr
        })
        queryset = model_admin.get_queryset(request).filter(
            cls.build_query(attributes, term)
        )
        if related:
            queryset = queryset.select_related(*related)
        queryset = queryset.distinct()[:limit]

        title_attribute = getattr(model_admin, 'record_title_attribute', None)
        opts = model_admin.model._meta
        hits = []
        for obj in queryset:
            title = getattr(obj, title_attribute) if title_attribute else obj
            if hasattr(model_admin, 'get_global_search_result_url'):
                url = model_admin.get_global_search_result_url(obj)
            else:
                try:
                    url = reverse(
                        f'{model_admin.admin_site.name}:{opts.app_label}_{opts.model_name}_change',
                        args=(quote(obj.pk),),
                    )
                except NoReverseMatch:
                    url = None
            details = {}
            if hasattr(model_admin, 'get_global_search_result_details'):
                details = cls.format_details(model_admin.get_global_search_result_details(obj))
            hits.append({
                'id': obj.pk,
                'title': str(title),
                'url': url,
                'details': details,
            })
        return hits

    @classmethod
    def search(cls, admin_site, request, term: str) -> List[Dict[str, Any]]:
        """
        Search every registered resource that declares searchable attributes.

        Returns one group per resource that has hits:
        {'resource': 'Products', 'model': 'catalog.product', 'results': [...]}
        """
        groups = []
        for model, model_admin in admin_site._registry.items():
            hits = cls.search_model_admin(model_admin, request, term)
            if not hits:
                continue
            groups.append({
                'resource': getattr(model_admin, 'navigation_label', None) or str(model._meta.verbose_name_plural),
                'model': model._meta.label_lower,
                'results': hits,
            })
        groups.sort(key=lambda g: g['resource'])
        return groups
