"""
Duplicate order detection.
"""
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from django.conf import settings
from django.utils import timezone

from .models import OrderModel, OrderStatus

logger = logging.getLogger(__name__)

DUPLICATE_ORDER_MESSAGE = "동일한 주문이 최근에 생성되었습니다. 잠시 후 다시 시도해주세요."

ACTIVE_STATUSES = (OrderStatus.PENDING, OrderStatus.PROCESSING)


@dataclass
class DuplicateCheckResult:
    is_duplicate: bool
    matched_order: Optional[OrderModel] = None
    message: Optional[str] = None


def canonicalize(pairs: Iterable[Tuple[object, int]]) -> List[Tuple[str, int]]:
    """Sort (product id, quantity) pairs by product id string, then quantity."""
    return sorted((str(product_id), int(quantity)) for product_id, quantity in pairs)


class OrderDuplicateDetector:
    """
    Detects an identical order placed by the same user within a trailing window.

    Only pending and processing orders count. Two orders are identical when
    their (product id, quantity) multisets match exactly. Errors while
    checking are logged and reported as "not a duplicate".
    """

    def __init__(self, window_minutes: int = None):
        self._window_minutes = window_minutes

    @property
    def window_minutes(self) -> int:
        if self._window_minutes is None:
            return settings.ORDER_DUPLICATE_WINDOW_MINUTES
        return self._window_minutes

    def _recent_orders(self, user_id: UUID):
        since = timezone.now() - timedelta(minutes=self.window_minutes)
        return (
            OrderModel.objects
            .filter(user_id=user_id, created_at__gte=since, status__in=ACTIVE_STATUSES)
            .prefetch_related('items')
            .order_by('-created_at')
        )

    def check(self, user_id: UUID, items: Iterable) -> DuplicateCheckResult:
        """
        items: objects exposing product_id and quantity (order lines or
        requested items).
        """
        try:
            candidate = canonicalize((item.product_id, item.quantity) for item in items)

            for order in self._recent_orders(user_id):
                existing = canonicalize(
                    (item.product_id, item.quantity) for item in order.items.all()
                )
                if existing == candidate:
                    logger.info(
                        f"중복 주문 감지: user={user_id}, 기존 주문={order.order_number}"
                    )
                    return DuplicateCheckResult(
                        is_duplicate=True,
                        matched_order=order,
                        message=DUPLICATE_ORDER_MESSAGE,
                    )
        except Exception as e:
            logger.error(f"주문 중복 체크 실패 (중복 아님으로 처리): {str(e)}", exc_info=True)
            return DuplicateCheckResult(is_duplicate=False)

        return DuplicateCheckResult(is_duplicate=False)
