# tests/unit/services/shipping/test_shipping_transport.py
import pytest
import requests

from shipping_calc.core.exceptions import TransportFailure
from shipping_calc.services.shipping.transport import post_xml


def test_post_xml(mock_post, response_factory):
    mock_post.return_value = response_factory("<OK/>")

    body = post_xml("https://carrier.test/rates", '<?xml version="1.0" encoding="UTF-8"?>\n<Q/>', timeout=12)

    assert body == "<OK/>"
    mock_post.assert_called_once_with(
        "https://carrier.test/rates",
        headers={"Content-Type": "text/xml"},
        data=b'<?xml version="1.0" encoding="UTF-8"?>\n<Q/>',
        timeout=12,
    )


def test_post_xml_encodes_utf8(mock_post, response_factory):
    mock_post.return_value = response_factory("<OK/>")
    post_xml("http://carrier.test/", "<Q>Café</Q>")
    _, kwargs = mock_post.call_args
    assert kwargs["data"] == "<Q>Café</Q>".encode("utf-8")


@pytest.mark.parametrize("error", [
    requests.ConnectionError("Failed to connect"),
    requests.Timeout("Read timed out"),
    requests.exceptions.SSLError("bad handshake"),
])
def test_network_errors(mock_post, error):
    mock_post.side_effect = error
    with pytest.raises(TransportFailure) as exc_info:
        post_xml("https://carrier.test/rates", "<Q/>")
    assert exc_info.value.__cause__ is error
    assert exc_info.value.status_code is None


@pytest.mark.parametrize("status_code", [301, 403, 404, 500, 503])
def test_http_errors(mock_post, response_factory, status_code):
    mock_post.return_value = response_factory("nope", status_code=status_code)
    with pytest.raises(TransportFailure) as exc_info:
        post_xml("https://carrier.test/rates", "<Q/>")
    assert exc_info.value.status_code == status_code
    assert str(status_code) in str(exc_info.value)
    assert exc_info.value.response_text == "nope"
