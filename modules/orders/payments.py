"""
Payment simulation.

Stand-in for a card gateway. Outcomes are keyed on fixture card numbers and
no funds are ever moved.
"""
import logging
import re
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.conf import settings

from shared.domain import ValueObject

logger = logging.getLogger(__name__)

PAYMENT_FAILED = 'PAYMENT_FAILED'
PAYMENT_COMPLETED = 'PAYMENT_COMPLETED'

SUCCESS_CARD = '4111111111111111'
DECLINED_CARD = '4000000000000002'
AUTHENTICATION_REQUIRED_CARD = '4000002500003155'

SUCCESS_MESSAGE = "결제가 완료되었습니다."
DECLINED_MESSAGE = "카드 승인이 거부되었습니다. 카드 정보를 확인해주세요."
AUTHENTICATION_REQUIRED_MESSAGE = "3D Secure 인증이 필요합니다."
INVALID_CARD_MESSAGE = "올바른 카드 번호를 입력해주세요."

_WHITESPACE = re.compile(r'\s+')
_CARD_NUMBER = re.compile(r'[0-9]{16}')


def normalize_card_number(raw) -> str:
    """Strip all whitespace from a card number."""
    if raw is None:
        return ''
    return _WHITESPACE.sub('', str(raw))


@dataclass(frozen=True)
class PaymentResult(ValueObject):
    success: bool
    message: str
    code: str


class PaymentSimulator:
    """Deterministic payment authorization with simulated gateway latency."""

    def __init__(self, delay_seconds: float = None):
        self._delay_seconds = delay_seconds

    @property
    def delay_seconds(self) -> float:
        if self._delay_seconds is None:
            return settings.PAYMENT_SIMULATION_DELAY_SECONDS
        return self._delay_seconds

    def validate(self, payment_method: str, payment_info: Optional[dict], total_amount: Decimal) -> bool:
        """Admission check run before the order is persisted. Currently accepts everything."""
        logger.info(
            f"결제 검증 (테스트 모드): method={payment_method}, "
            f"결제정보 {'있음' if payment_info else '없음'}, 금액={total_amount}"
        )
        return True

    def _decide(self, card_number: str) -> PaymentResult:
        if card_number == DECLINED_CARD:
            return PaymentResult(False, DECLINED_MESSAGE, PAYMENT_FAILED)
        if card_number == AUTHENTICATION_REQUIRED_CARD:
            return PaymentResult(False, AUTHENTICATION_REQUIRED_MESSAGE, PAYMENT_FAILED)
        if card_number == SUCCESS_CARD:
            return PaymentResult(True, SUCCESS_MESSAGE, PAYMENT_COMPLETED)
        if not _CARD_NUMBER.fullmatch(card_number):
            return PaymentResult(False, INVALID_CARD_MESSAGE, PAYMENT_FAILED)
        # Unlisted but well-formed numbers succeed.
        return PaymentResult(True, SUCCESS_MESSAGE, PAYMENT_COMPLETED)

    def authorize(self, card_number) -> PaymentResult:
        """Authorize a card payment. Blocks the calling worker for delay_seconds."""
        card_number = normalize_card_number(card_number)
        result = self._decide(card_number)

        if self.delay_seconds:
            time.sleep(self.delay_seconds)

        masked = f"****{card_number[-4:]}" if len(card_number) >= 4 else '(없음)'
        if result.success:
            logger.info(f"결제 승인: 카드 {masked}")
        else:
            logger.info(f"결제 실패: 카드 {masked} - {result.message}")
        return result
