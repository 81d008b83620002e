"""Shared fixtures."""

import pytest

from bigcommerce_api.client import BigcommerceClient
from tests.helpers import BASIC_SETTINGS, OAUTH_SETTINGS


@pytest.fixture
def client():
    return BigcommerceClient(OAUTH_SETTINGS)


@pytest.fixture
def basic_client():
    return BigcommerceClient(BASIC_SETTINGS)
