"""
Health check tests.
"""
import pytest


def test_health(api_client):
    response = api_client.get('/health/')

    assert response.status_code == 200
    assert response.data['status'] == 'healthy'


@pytest.mark.django_db
def test_readiness(api_client):
    response = api_client.get('/health/ready/')

    assert response.status_code == 200


def test_liveness(api_client):
    assert api_client.get('/health/live/').status_code == 200


@pytest.mark.django_db
def test_readiness_reports_checkout_settings(api_client, settings):
    settings.ORDER_DUPLICATE_WINDOW_MINUTES = 7

    response = api_client.get('/health/ready/')

    assert response.data['status'] == 'ready'
    assert response.data['checks']['database'] == {'healthy': True}
    assert response.data['checkout']['duplicateWindowMinutes'] == 7


@pytest.mark.django_db
def test_readiness_fails_when_cache_is_down(api_client, monkeypatch):
    from shared.interfaces import health_views

    def broken(*args, **kwargs):
        raise ConnectionError('redis unavailable')

    monkeypatch.setattr(health_views.cache, 'set', broken)

    response = api_client.get('/health/ready/')

    assert response.status_code == 503
    assert response.data['checks']['cache']['healthy'] is False
