import json
from unittest.mock import patch

import pytest

from foursquare_merchant import cli
from foursquare_merchant.client import MerchantClient
from foursquare_merchant.errors import RemoteAPIError
from foursquare_merchant.response import wrap


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("FOURSQUARE_CLIENT_ID", "cid")
    monkeypatch.setenv("FOURSQUARE_CLIENT_SECRET", "csecret")
    monkeypatch.setenv("FOURSQUARE_ACCESS_TOKEN", "token123")
    monkeypatch.delenv("FOURSQUARE_ENDPOINT", raising=False)
    monkeypatch.delenv("FOURSQUARE_TIMEOUT_SEC", raising=False)
    monkeypatch.delenv("FOURSQUARE_VERIFY_SSL", raising=False)
    return monkeypatch


@pytest.mark.unit
def test_parse_args_list_specials_collects_venue_ids():
    args = cli.parse_args(["list-specials", "--venue-id", "v1", "--venue-id", "v2"])

    assert args.command == "list-specials"
    assert args.venue_id == ["v1", "v2"]
    assert args.status == "all"


@pytest.mark.unit
def test_parse_args_requires_command():
    with pytest.raises(SystemExit):
        cli.parse_args([])


@pytest.mark.unit
def test_main_prints_result_as_json(env, capsys):
    payload = wrap({"specials": {"count": 1, "items": [{"id": "s1"}]}})

    with patch.object(MerchantClient, "list_specials", return_value=payload) as mock_list:
        code = cli.main(["--log-level", "ERROR", "list-specials", "--venue-id", "v1"])

    assert code == 0
    mock_list.assert_called_once_with(["v1"], "all")
    assert json.loads(capsys.readouterr().out) == payload.to_dict()


@pytest.mark.unit
def test_main_campaign_timeseries(env, capsys):
    series = wrap([{"venueId": "v1", "totalCheckins": 4}])

    with patch.object(MerchantClient, "timeseries_for_campaign", return_value=series) as mock_ts:
        code = cli.main(["campaign-timeseries", "c1", "--start-at", "1300000000"])

    assert code == 0
    mock_ts.assert_called_once_with("c1", 1300000000, None)
    assert json.loads(capsys.readouterr().out) == [{"venueId": "v1", "totalCheckins": 4}]


@pytest.mark.unit
def test_main_returns_1_on_api_error(env, capsys):
    error = RemoteAPIError(code=403, message="not allowed", error_type="not_authorized")

    with patch.object(MerchantClient, "configuration_for_special", side_effect=error):
        code = cli.main(["--log-level", "CRITICAL", "special-config", "s1"])

    assert code == 1
    assert capsys.readouterr().out == ""


@pytest.mark.unit
def test_main_returns_1_without_credentials(monkeypatch):
    monkeypatch.delenv("FOURSQUARE_CLIENT_ID", raising=False)
    monkeypatch.delenv("FOURSQUARE_CLIENT_SECRET", raising=False)
    monkeypatch.delenv("FOURSQUARE_ACCESS_TOKEN", raising=False)

    assert cli.main(["--log-level", "ERROR", "list-campaigns"]) == 1
