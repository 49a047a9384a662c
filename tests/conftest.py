"""Pytest configuration and fixtures for blockchain_api tests."""

import copy
import json
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
import requests


GENESIS_HASH = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
BLOCK_1_HASH = "00000000839a8e6886ab5951d76f411475428afc90947ee320161bbf18eb6048"


# ============================================================================
# HTTP HELPERS
# ============================================================================

def make_response(body: Any = "", status_code: int = 200, reason: str = "OK") -> requests.Response:
    """Build a real requests.Response carrying ``body``."""
    if not isinstance(body, str):
        body = json.dumps(body)

    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    response._content = body.encode("utf-8")
    return response


@pytest.fixture
def response_factory():
    """Factory building real requests.Response objects."""
    return make_response


@pytest.fixture
def mock_session():
    """Mock requests session that answers every call with an empty 200."""
    session = MagicMock()
    session.get.return_value = make_response("{}")
    session.post.return_value = make_response("{}")
    return session


@pytest.fixture
def http_client(mock_session):
    """Transport against the main host without an api code."""
    from blockchain_api.core.http_client import BlockchainHttpClient

    return BlockchainHttpClient(session=mock_session)


@pytest.fixture
def respond(mock_session):
    """Set the body (and status) of the next GET and POST responses."""
    def _respond(body: Any = "", status_code: int = 200, reason: str = "OK"):
        mock_session.get.return_value = make_response(body, status_code, reason)
        mock_session.post.return_value = make_response(body, status_code, reason)
        return mock_session
    return _respond


# ============================================================================
# SAMPLE DATA FIXTURES
# ============================================================================

@pytest.fixture
def sample_output() -> Dict[str, Any]:
    return {
        "addr": "12c6DSiU4Rq3P4ZxziKxzrGJG4gJeUuWhU",
        "n": 0,
        "script": "4104d46c4968bde02899d2aa0963367c7a6ce34eec332b32e42e5f3407e052d64ac625da6f0718e7b302140434bd725706957c092db53805b821a85b23a7ac61725bac",
        "spent": True,
        "tx_index": 14849,
        "type": 0,
        "value": 5000000000,
    }


@pytest.fixture
def sample_coinbase_tx(sample_output) -> Dict[str, Any]:
    """Coinbase transaction of block 1 as returned inside a rawblock."""
    return {
        "hash": "0e3e2357e806b6cdb1f70b54c3a3a17b6714ee1f0e68bebb44a74b1efd512098",
        "ver": 1,
        "vin_sz": 1,
        "vout_sz": 1,
        "size": 134,
        "relayed_by": "0.0.0.0",
        "tx_index": 14849,
        "time": 1231469665,
        "inputs": [{"sequence": 4294967295, "script": "04ffff001d0104"}],
        "out": [sample_output],
    }


@pytest.fixture
def sample_spend_tx(sample_output) -> Dict[str, Any]:
    """Non-coinbase transaction as returned by rawtx."""
    return {
        "hash": "f4184fc596403b9d638783cf57adfe4c75c605f6356fbc91338530e9831e9e16",
        "ver": 1,
        "size": 275,
        "relayed_by": "0.0.0.0",
        "tx_index": 15105,
        "time": 1231731025,
        "block_height": 170,
        "double_spend": False,
        "inputs": [{
            "sequence": 4294967295,
            "script": "47304402204e45e16932b8af514961a1d3a1a25fdf3f4f7732e9d624c6c61548ab5fb8cd41",
            "prev_out": sample_output,
        }],
        "out": [
            {"addr": "1Q2TWHE3GMdB6BZKafqwxXtWAWgFt5Jvm3", "n": 0, "script": "4104ae1a62fe09",
             "spent": True, "tx_index": 15105, "value": 1000000000},
            {"addr": "12cbQLTFMXRnSzktFkuoG3eHoMeFtpTu3S", "n": 1, "script": "410411db93e1dcdb",
             "spent": True, "tx_index": 15105, "value": 4000000000},
        ],
    }


@pytest.fixture
def sample_block(sample_coinbase_tx) -> Dict[str, Any]:
    """Block 1 as returned by rawblock."""
    return {
        "hash": BLOCK_1_HASH,
        "ver": 1,
        "prev_block": GENESIS_HASH,
        "mrkl_root": "0e3e2357e806b6cdb1f70b54c3a3a17b6714ee1f0e68bebb44a74b1efd512098",
        "time": 1231469665,
        "bits": 486604799,
        "fee": 0,
        "nonce": 2573394689,
        "n_tx": 1,
        "size": 215,
        "block_index": 1,
        "main_chain": True,
        "height": 1,
        "tx": [copy.deepcopy(sample_coinbase_tx)],
    }


@pytest.fixture
def sample_address(sample_spend_tx) -> Dict[str, Any]:
    return {
        "hash160": "12ab8dc588ca9d5787dde7eb29569da63c3a238c",
        "address": "12c6DSiU4Rq3P4ZxziKxzrGJG4gJeUuWhU",
        "n_tx": 2,
        "total_received": 5000000000,
        "total_sent": 5000000000,
        "final_balance": 0,
        "txs": [sample_spend_tx],
    }
