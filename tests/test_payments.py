"""
Payment simulator tests.
"""
import pytest

from modules.orders import payments
from modules.orders.payments import PaymentSimulator, normalize_card_number


@pytest.fixture
def simulator():
    return PaymentSimulator(delay_seconds=0)


def test_normalize_card_number_strips_whitespace():
    assert normalize_card_number(' 4111 1111\t1111 1111 ') == '4111111111111111'
    assert normalize_card_number(None) == ''


@pytest.mark.parametrize('card_number, success, message', [
    ('4111111111111111', True, payments.SUCCESS_MESSAGE),
    ('4111 1111 1111 1111', True, payments.SUCCESS_MESSAGE),
    ('4000000000000002', False, payments.DECLINED_MESSAGE),
    ('4000002500003155', False, payments.AUTHENTICATION_REQUIRED_MESSAGE),
    ('', False, payments.INVALID_CARD_MESSAGE),
    (None, False, payments.INVALID_CARD_MESSAGE),
    ('411111111111111', False, payments.INVALID_CARD_MESSAGE),
    ('41111111111111112', False, payments.INVALID_CARD_MESSAGE),
    ('4111-1111-1111-1111', False, payments.INVALID_CARD_MESSAGE),
    ('5555555555554444', True, payments.SUCCESS_MESSAGE),
])
def test_authorize_fixtures(simulator, card_number, success, message):
    result = simulator.authorize(card_number)

    assert result.success is success
    assert result.message == message
    if not success:
        assert result.code == payments.PAYMENT_FAILED


def test_validate_always_passes(simulator):
    assert simulator.validate('bank', None, 0) is True


def test_authorize_waits_for_configured_delay(monkeypatch, settings):
    settings.PAYMENT_SIMULATION_DELAY_SECONDS = 0.25
    slept = []
    monkeypatch.setattr(payments.time, 'sleep', slept.append)

    PaymentSimulator().authorize('4111111111111111')

    assert slept == [0.25]


def test_no_delay_when_disabled(monkeypatch, simulator):
    slept = []
    monkeypatch.setattr(payments.time, 'sleep', slept.append)

    simulator.authorize('4111111111111111')

    assert slept == []
