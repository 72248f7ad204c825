"""
Django signals for the catalog app.
Logs the product lifecycle; change history itself is kept by simple_history.
"""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Product

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Product)
def log_product_saved(sender, instance, created, **kwargs):
    if created:
        logger.info('Product created: %s (slug=%s, sku=%s)', instance.pk, instance.slug, instance.sku)
    else:
        logger.info('Product updated: %s (slug=%s)', instance.pk, instance.slug)


@receiver(post_delete, sender=Product)
def log_product_deleted(sender, instance, **kwargs):
    logger.info('Product deleted: %s (sku=%s)', instance.pk, instance.sku)
