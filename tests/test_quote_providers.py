from unittest.mock import MagicMock, patch

import pytest
import requests
from hypothesis import given
from hypothesis import strategies as st

from bridge.core.errors import UpstreamError
from bridge.market.remote import RemoteQuoteProvider
from bridge.market.synthetic import SyntheticQuoteProvider


def _decimals_ok(x):
    return round(x, 2) == x


@given(st.integers())
def test_synthetic_quote_ranges(seed):
    provider = SyntheticQuoteProvider(seed=seed)
    for _ in range(5):
        q = provider.get_quote("HG=F")
        assert q["symbol"] == "HG=F"
        assert 100 <= q["lastPrice"] <= 150
        assert 0 <= q["change"] <= 5
        assert 0 <= q["changePercent"] <= 2
        assert all(_decimals_ok(q[k]) for k in ("lastPrice", "change", "changePercent"))


def test_synthetic_quote_seeded_is_reproducible():
    a = SyntheticQuoteProvider(seed=42)
    b = SyntheticQuoteProvider(seed=42)
    assert [a.get_quote("X") for _ in range(3)] == [b.get_quote("X") for _ in range(3)]


def _response(status=200, body=None, json_error=False):
    resp = MagicMock()
    resp.status_code = status
    if json_error:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = body
    return resp


def test_remote_forwards_body_verbatim():
    body = {"HG=F": {"symbol": "HG=F", "lastPrice": 4.1, "extra": [1, 2]}}
    provider = RemoteQuoteProvider(base_url="https://example.test/v1/marketdata", api_key="k")
    with patch("bridge.market.remote.requests.get", return_value=_response(body=body)) as get:
        assert provider.get_quote("HG=F") == body
    args, kwargs = get.call_args
    assert args[0] == "https://example.test/v1/marketdata/HG%3DF/quotes"
    assert kwargs["params"] == {"apikey": "k"}
    assert kwargs["timeout"] == 5.0


@pytest.mark.parametrize(
    "mock_kwargs",
    [
        {"side_effect": requests.ConnectionError("down")},
        {"side_effect": requests.Timeout("slow")},
        {"return_value": _response(status=401, body={"error": "bad key"})},
        {"return_value": _response(json_error=True)},
    ],
)
def test_remote_failures_raise_upstream_error(mock_kwargs):
    provider = RemoteQuoteProvider(api_key="k")
    with patch("bridge.market.remote.requests.get", **mock_kwargs):
        with pytest.raises(UpstreamError):
            provider.get_quote("HG=F")
