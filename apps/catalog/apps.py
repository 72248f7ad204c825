from django.apps import AppConfig
from django.contrib.admin.apps import AdminConfig


class ShopAdminConfig(AdminConfig):
    """Installs the shop admin site in place of the stock one."""
    default_site = 'apps.catalog.sites.ShopAdminSite'


class CatalogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.catalog'
    label = 'catalog'
    verbose_name = 'Shop'

    def ready(self):
        from . import signals  # noqa: F401
