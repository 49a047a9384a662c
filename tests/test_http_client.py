"""
Unit tests for the HTTP transport.

The session is a MagicMock returning real requests.Response objects, so no
network is used.
"""

import json
from typing import Dict
from unittest.mock import MagicMock

import pytest
import requests

from blockchain_api.core.exceptions import BlockNotFoundError, ClientApiError, ServerApiError
from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.core.query_string import QueryString
from blockchain_api.models.receive import BalanceUpdateRequest


class TestGet:
    """Tests for GET requests."""

    def test_url_built_from_base_and_route(self, http_client, mock_session):
        http_client.get("latestblock")

        url = mock_session.get.call_args.args[0]
        assert url == "https://blockchain.info/latestblock"
        assert mock_session.get.call_args.kwargs["timeout"] == 100

    def test_query_string_appended(self, http_client, mock_session):
        http_client.get("blocks/x", QueryString().add("format", "json"))

        assert mock_session.get.call_args.args[0] == "https://blockchain.info/blocks/x?format=json"

    def test_query_joined_with_ampersand_when_route_has_query(self, http_client, mock_session):
        http_client.get("charts/x?cors=true", QueryString().add("format", "json"))

        assert mock_session.get.call_args.args[0] == "https://blockchain.info/charts/x?cors=true&format=json"

    def test_api_code_added_without_query(self, mock_session):
        """Test a query is created to carry the api code."""
        client = BlockchainHttpClient(api_code="secret", session=mock_session)

        client.get("ticker")

        assert mock_session.get.call_args.args[0] == "https://blockchain.info/ticker?api_code=secret"

    def test_api_code_overrides_existing_value(self, mock_session):
        """Test an api_code already in the query is replaced, not duplicated."""
        client = BlockchainHttpClient(api_code="secret", session=mock_session)
        query_string = QueryString().add("api_code", "stale").add("format", "json")

        client.get("stats", query_string)

        assert mock_session.get.call_args.args[0] == "https://blockchain.info/stats?api_code=secret&format=json"

    def test_caller_query_string_untouched(self, mock_session):
        """Test the api code goes into the request without changing the caller's query."""
        client = BlockchainHttpClient(api_code="secret", session=mock_session)
        query_string = QueryString().add("format", "json")

        client.get("stats", query_string)
        client.get("stats", query_string)

        assert str(query_string) == "?format=json"
        assert mock_session.get.call_args.args[0] == "https://blockchain.info/stats?format=json&api_code=secret"

    def test_base_url_with_path_prefix(self, mock_session):
        client = BlockchainHttpClient(base_url="https://api.blockchain.info/v2/", session=mock_session)

        client.get("receive/checkgap")

        assert mock_session.get.call_args.args[0] == "https://api.blockchain.info/v2/receive/checkgap"

    def test_session_headers(self, mock_session):
        BlockchainHttpClient(session=mock_session, user_agent="tests/1.0")

        headers = mock_session.headers.update.call_args.args[0]
        assert headers["User-Agent"] == "tests/1.0"
        assert headers["Accept"] == "application/json"

    def test_route_required(self, http_client):
        with pytest.raises(ClientApiError):
            http_client.get(None)


class TestDecoding:
    """Tests for response decoding order."""

    def test_raw_text_without_decoder(self, http_client, respond):
        respond("0.00002531")

        assert http_client.get("tobtc") == "0.00002531"

    def test_response_type(self, http_client, respond):
        respond({"USD": 5, "EUR": 6})

        assert http_client.get("pools", response_type=Dict[str, int]) == {"USD": 5, "EUR": 6}

    def test_deserializer_wins_over_response_type(self, http_client, respond):
        respond('{"a": 1}')
        deserializer = MagicMock(return_value="custom")

        result = http_client.get("x", deserializer=deserializer, response_type=Dict[str, int])

        assert result == "custom"
        deserializer.assert_called_once_with('{"a": 1}')


class TestResponseValidation:
    """Tests for error envelope handling."""

    def test_error_envelope_on_success_status(self, http_client, respond):
        """Test a 200 carrying {"error": ...} raises a 400 server error."""
        respond('{"error":"Invalid Bitcoin Address"}')

        with pytest.raises(ServerApiError) as exc_info:
            http_client.get("address/foo")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid Bitcoin Address"

    def test_block_not_found(self, http_client, respond):
        respond("Block Not Found", status_code=500, reason="Internal Server Error")

        with pytest.raises(BlockNotFoundError) as exc_info:
            http_client.get("rawblock/abc")

        assert exc_info.value.status_code == 404

    def test_block_not_found_case_insensitive(self, http_client, respond):
        respond("block not found", status_code=500, reason="Internal Server Error")

        with pytest.raises(BlockNotFoundError):
            http_client.get("rawblock/abc")

    def test_other_failures_keep_status_and_reason(self, http_client, respond):
        respond("No free outputs to spend", status_code=500, reason="Internal Server Error")

        with pytest.raises(ServerApiError) as exc_info:
            http_client.get("unspent")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Internal Server Error: No free outputs to spend"
        assert not isinstance(exc_info.value, BlockNotFoundError)

    def test_transport_errors_propagate(self, http_client, mock_session):
        mock_session.get.side_effect = requests.ConnectionError("reset")

        with pytest.raises(requests.ConnectionError):
            http_client.get("latestblock")


class TestPost:
    """Tests for POST requests."""

    def test_api_code_on_route(self, mock_session):
        client = BlockchainHttpClient(api_code="secret", session=mock_session)

        client.post("pushtx", "0100")

        assert mock_session.post.call_args.args[0] == "https://blockchain.info/pushtx?api_code=secret"

    def test_api_code_joined_with_ampersand(self, mock_session):
        client = BlockchainHttpClient(api_code="secret", session=mock_session)

        client.post("pushtx?cors=true", "0100")

        assert mock_session.post.call_args.args[0] == "https://blockchain.info/pushtx?cors=true&api_code=secret"

    def test_model_body_serialized_by_alias(self, http_client, mock_session):
        request = BalanceUpdateRequest(address="1abc", confirmations=3, key="k")

        http_client.post("balance_update", request, content_type="application/json")

        kwargs = mock_session.post.call_args.kwargs
        assert json.loads(kwargs["data"]) == {"addr": "1abc", "confs": 3, "key": "k"}
        assert kwargs["headers"]["Content-Type"] == "application/json; charset=utf-8"

    def test_default_content_type(self, http_client, mock_session):
        http_client.post("x", {"a": 1})

        kwargs = mock_session.post.call_args.kwargs
        assert kwargs["data"] == b'{"a": 1}'
        assert kwargs["headers"]["Content-Type"] == "application/x-www-form-urlencoded; charset=utf-8"
        assert kwargs["timeout"] == 100

    def test_multipart(self, http_client, mock_session):
        http_client.post("pushtx", "0100abcd", multipart=True)

        kwargs = mock_session.post.call_args.kwargs
        assert "data" not in kwargs
        assert kwargs["files"]["tx"][1] == b"0100abcd"

    def test_post_validates_response(self, http_client, respond):
        respond("Bad transaction", status_code=500, reason="Internal Server Error")

        with pytest.raises(ServerApiError):
            http_client.post("pushtx", "00", multipart=True)


class TestLifecycle:
    """Tests for close and context manager use."""

    def test_close_releases_session(self, http_client, mock_session):
        http_client.close()
        http_client.close()

        assert http_client.closed
        mock_session.close.assert_called_once()

    def test_calls_after_close_fail(self, http_client, mock_session):
        http_client.close()

        with pytest.raises(ClientApiError):
            http_client.get("latestblock")
        with pytest.raises(ClientApiError):
            http_client.post("pushtx", "00")
        mock_session.get.assert_not_called()

    def test_context_manager(self, mock_session):
        with BlockchainHttpClient(session=mock_session) as client:
            client.get("latestblock")

        assert client.closed
        mock_session.close.assert_called_once()
