# tests/conftest.py
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from shipping_calc.core.config import get_settings

DHL_SUCCESS_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<eCommerce action="Response" version="1.1">
  <Requestor><ID>test_user</ID></Requestor>
  <Shipment action="RateEstimate" version="1.0">
    <Result>
      <Code>203</Code>
      <Desc>Shipment estimate successful.</Desc>
    </Result>
    <EstimateDetail>
      <RateEstimate>
        <TotalChargeEstimate>172.50</TotalChargeEstimate>
      </RateEstimate>
    </EstimateDetail>
  </Shipment>
</eCommerce>"""

FREIGHTQUOTE_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<FREIGHTQUOTE>
  <CARRIER>
    <CARRIERNAME>Roadrunner Freight</CARRIERNAME>
    <RATE>210.45</RATE>
  </CARRIER>
  <CARRIER>
    <CARRIERNAME>A Duie Pyle</CARRIERNAME>
    <RATE>187.02</RATE>
  </CARRIER>
  <CARRIER>
    <CARRIERNAME>Estes Express</CARRIERNAME>
    <RATE>199.99</RATE>
  </CARRIER>
</FREIGHTQUOTE>"""


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Make sure endpoints and credentials come from defaults, not the developer's shell."""
    for name in (
        "DHL_API_USER", "DHL_API_PASSWORD", "DHL_SHIPPING_KEY", "DHL_ACCOUNT_NUM", "DHL_ENDPOINT",
        "FREIGHTQUOTE_EMAIL", "FREIGHTQUOTE_PASSWORD", "FREIGHTQUOTE_ENDPOINT", "SHIPPING_HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir("/")  # no stray .env
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dhl_params():
    """A valid DHL parameter set (a Tuesday ship date)."""
    return {
        "api_user": "test_user",
        "api_password": "test_pass",
        "shipping_key": "test_key",
        "account_num": "123456789",
        "date": datetime(2008, 6, 10),
        "service_code": "E",
        "shipment_code": "P",
        "weight": 34,
        "to_zip": 10001,
        "to_state": "NY",
    }


@pytest.fixture
def freight_params():
    return {
        "api_email": "xmltest@FreightQuote.com",
        "api_password": "XML",
        "from_zip": 23422,
        "to_zip": 43243,
        "weight": 150,
        "dimensions": "12x23x12",
    }


def make_response(text, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def mock_post(mocker):
    """Patch requests.post as seen by the transport. Returns a DHL success by default."""
    return mocker.patch(
        "shipping_calc.services.shipping.transport.requests.post",
        return_value=make_response(DHL_SUCCESS_RESPONSE),
    )


@pytest.fixture
def response_factory():
    """Build a fake requests.Response: response_factory(text, status_code=200)."""
    return make_response


@pytest.fixture
def dhl_success_response():
    return DHL_SUCCESS_RESPONSE


@pytest.fixture
def freightquote_response():
    return FREIGHTQUOTE_RESPONSE
