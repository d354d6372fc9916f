from unittest.mock import MagicMock

import pytest
import requests

from flupcas import CASClient, CASEndpoints
from tests.utils import BASE_URL, SERVICE_URL, SUCCESS_BODY, FakeResponse


@pytest.fixture
def endpoints():
    return CASEndpoints(BASE_URL, "/login", "/logout", "/serviceValidate", SERVICE_URL)


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.get.return_value = FakeResponse(SUCCESS_BODY)
    return session


@pytest.fixture
def client(endpoints, session):
    return CASClient(endpoints, session=session)
