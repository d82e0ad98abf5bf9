import os
import django
from django.conf import settings

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings")
django.setup()

import pytest
from datetime import date, datetime, timezone as dt_timezone
from django.contrib.auth.models import User
from rest_framework.test import APIClient
from lending.services import create_loan


@pytest.fixture
def api_client():
    """Returns API client for making requests"""
    return APIClient()


def lending_url(path):
    """Helper to build lending API URLs"""
    return f"/api/lending/{path.lstrip('/')}"


def payment_url(path):
    """Helper to build payment API URLs"""
    return f"/api/payment/{path.lstrip('/')}"


def received(day, month=2, year=2026):
    """Timezone-aware receipt timestamp at noon UTC"""
    return datetime(year, month, day, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def borrower_user():
    """Creates the borrower who owns the loans under test"""
    return User.objects.create_user(
        username="test_borrower", email="borrower@test.com", password="testpass123"
    )


@pytest.fixture
def other_user():
    """Creates a second user who owns nothing"""
    return User.objects.create_user(
        username="other_user", email="other@test.com", password="testpass123"
    )


@pytest.fixture
def auth_client(api_client, borrower_user):
    """API client authenticated as the borrower"""
    api_client.force_authenticate(user=borrower_user)
    return api_client


@pytest.fixture
def loan(borrower_user):
    """A 1000 VND loan over 3 terms: installments 333, 333, 334"""
    return create_loan(borrower_user, 1000, "VND", 3, date(2026, 1, 15))
