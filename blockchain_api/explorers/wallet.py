"""
Hosted wallet operations through a local wallet service.

The wallet service (blockchain-wallet-service) exposes the ``merchant`` API
on a host you run yourself, by default http://127.0.0.1:3000.
"""

import json
from typing import Dict, List, Optional
from urllib.parse import quote

import structlog

from blockchain_api.core.exceptions import ArgumentMissingError
from blockchain_api.core.http_client import BlockchainHttpClient
from blockchain_api.core.normalizers import (
    deserialize_archived,
    deserialize_unarchived,
    deserialize_wallet_addresses,
    deserialize_wallet_balance,
)
from blockchain_api.core.query_string import QueryString
from blockchain_api.core.validation import require_items, require_positive, require_text
from blockchain_api.models.bitcoin_value import BitcoinValue
from blockchain_api.models.wallet import (
    CreateWalletRequest,
    CreateWalletResponse,
    PaymentResponse,
    WalletAddress,
)

logger = structlog.get_logger(__name__)

DEFAULT_SERVICE_URL = "http://127.0.0.1:3000"


class Wallet:
    """
    A single hosted wallet.

    Every call authenticates with the main password, plus the second password
    when the wallet has double encryption enabled.
    """

    def __init__(self,
                 http_client: BlockchainHttpClient,
                 identifier: str,
                 password: str,
                 second_password: Optional[str] = None):
        if http_client is None:
            raise ArgumentMissingError("http_client")
        self.http_client = http_client
        self.identifier = require_text(identifier, "identifier")
        self._password = require_text(password, "password")
        self._second_password = second_password

    def __repr__(self) -> str:
        return f"Wallet(identifier={self.identifier!r})"

    # ==================== Balance & addresses ====================

    def get_balance(self) -> BitcoinValue:
        """Get the confirmed balance of the whole wallet."""
        return self.http_client.get(self._route("balance"), self._auth_query(),
                                    deserializer=deserialize_wallet_balance)

    def get_address(self, address: str) -> WalletAddress:
        """Get the balance of one address of the wallet."""
        require_text(address, "address")

        query_string = self._auth_query()
        query_string.add("address", address)
        return self.http_client.get(self._route("address_balance"), query_string, response_type=WalletAddress)

    def list_addresses(self) -> List[WalletAddress]:
        return self.http_client.get(self._route("list"), self._auth_query(),
                                    deserializer=deserialize_wallet_addresses)

    def new_address(self, label: Optional[str] = None) -> WalletAddress:
        """Generate a new address, optionally labelled."""
        query_string = self._auth_query()
        if label is not None:
            query_string.add("label", quote(label, safe=""))

        address = self.http_client.get(self._route("new_address"), query_string, response_type=WalletAddress)
        logger.info("Wallet address created", identifier=self.identifier)
        return address

    def archive_address(self, address: str) -> Optional[str]:
        """Archive an address. Returns the archived address."""
        require_text(address, "address")

        query_string = self._auth_query()
        query_string.add("address", address)
        return self.http_client.get(self._route("archive_address"), query_string,
                                    deserializer=deserialize_archived)

    def unarchive_address(self, address: str) -> Optional[str]:
        """Unarchive an address. Returns the reactivated address."""
        require_text(address, "address")

        query_string = self._auth_query()
        query_string.add("address", address)
        return self.http_client.get(self._route("unarchive_address"), query_string,
                                    deserializer=deserialize_unarchived)

    # ==================== Payments ====================

    def send(self,
             to: str,
             amount: BitcoinValue,
             from_address: Optional[str] = None,
             fee: Optional[BitcoinValue] = None) -> PaymentResponse:
        """
        Send bitcoin to a single address.

        Args:
            to: Recipient address
            amount: Amount to send (must be > 0)
            from_address: Address or account index to send from
            fee: Transaction fee; the service picks one when omitted
        """
        require_text(to, "to")
        require_positive(amount, "amount")

        query_string = self._auth_query()
        query_string.add("to", to)
        query_string.add("amount", amount.satoshis)
        self._add_payment_options(query_string, from_address, fee)

        response = self.http_client.get(self._route("payment"), query_string, response_type=PaymentResponse)
        logger.info("Payment sent",
                    identifier=self.identifier,
                    tx_hash=response.tx_hash,
                    amount_satoshis=amount.satoshis)
        return response

    def send_many(self,
                  recipients: Dict[str, BitcoinValue],
                  from_address: Optional[str] = None,
                  fee: Optional[BitcoinValue] = None) -> PaymentResponse:
        """Send bitcoin to several addresses in one transaction."""
        require_items(recipients, "recipients", "Sending bitcoin requires at least one recipient")
        for address, amount in recipients.items():
            require_text(address, "recipients")
            require_positive(amount, "recipients")

        payload = json.dumps({address: amount.satoshis for address, amount in recipients.items()},
                             separators=(",", ":"))

        query_string = self._auth_query()
        query_string.add("recipients", quote(payload, safe=""))
        self._add_payment_options(query_string, from_address, fee)

        response = self.http_client.get(self._route("sendmany"), query_string, response_type=PaymentResponse)
        logger.info("Payment sent",
                    identifier=self.identifier,
                    tx_hash=response.tx_hash,
                    recipient_count=len(recipients))
        return response

    # ==================== Helpers ====================

    def _route(self, action: str) -> str:
        return f"merchant/{self.identifier}/{action}"

    def _auth_query(self) -> QueryString:
        query_string = QueryString()
        query_string.add("password", quote(self._password, safe=""))
        if self._second_password:
            query_string.add("second_password", quote(self._second_password, safe=""))
        return query_string

    @staticmethod
    def _add_payment_options(query_string: QueryString,
                             from_address: Optional[str],
                             fee: Optional[BitcoinValue]) -> None:
        if from_address is not None and from_address.strip():
            query_string.add("from", from_address)
        if fee is not None:
            query_string.add("fee", fee.satoshis)


class WalletCreator:
    """Creates hosted wallets through the wallet service."""

    def __init__(self, http_client: BlockchainHttpClient):
        self.http_client = http_client

    def create(self,
               password: str,
               private_key: Optional[str] = None,
               label: Optional[str] = None,
               email: Optional[str] = None) -> CreateWalletResponse:
        """
        Create a new wallet.

        Args:
            password: Main password of the new wallet
            private_key: Private key to import as the first address
            label: Label of the first address
            email: Email address to associate with the wallet
        """
        require_text(password, "password")
        api_code = self.http_client.api_code
        if api_code is None or not api_code.strip():
            raise ArgumentMissingError("api_code", "An api code is required to create wallets")

        request = CreateWalletRequest(
            password=password,
            api_code=api_code,
            private_key=private_key,
            label=label,
            email=email,
        )

        response = self.http_client.post("api/v2/create/", request,
                                         response_type=CreateWalletResponse,
                                         content_type="application/json")
        logger.info("Wallet created", identifier=response.identifier)
        return response
