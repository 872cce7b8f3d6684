import pytest
from moccasin.config import get_active_network

from script.deploy_mbat_token import deploy_mbat_token


@pytest.fixture(scope="session")
def account():
    return get_active_network().get_default_account()


@pytest.fixture(scope="function")
def mbat_token():
    return deploy_mbat_token()
