"""
Errors raised while writing catalog records.

Validation problems are reported by forms and serializers; these cover the
database or file storage refusing a write that already passed validation.
"""

import logging
from contextlib import contextmanager

from django.db import DatabaseError, transaction

logger = logging.getLogger(__name__)


class ProductWriteError(Exception):
    """A product could not be created, updated or deleted."""

    def __init__(self, action, product=None):
        self.action = action
        self.product = product
        super().__init__(f'The product could not be {action}d. Please try again.')


@contextmanager
def guard_product_write(action, product=None):
    """
    Run a product write in a savepoint, turning database and storage
    failures into ``ProductWriteError``.
    """
    try:
        with transaction.atomic():
            yield
    except (DatabaseError, OSError) as exc:
        logger.error(
            'Product %s failed for %s',
            action,
            getattr(product, 'pk', None) or getattr(product, 'name', None) or '-',
            exc_info=True,
        )
        raise ProductWriteError(action, product) from exc
