import logging
from typing import Any, Optional

import requests

from txgraph.config.settings import (
    NOWNODES_BASE_URL,
    NOWNODES_CREDENTIAL_HEADER,
    NOWNODES_REQUESTS_PER_SEC,
    NOWNODES_TIMEOUT_SEC,
)

from txgraph.adapters.provider.request_pacer import RequestPacer
from txgraph.core.dto import AddressRecord, TransactionRecord
from txgraph.core.errors import InvalidAddress, InvalidCredential, MalformedResponse, ProviderError
from txgraph.io.schemas import parse_address_record, parse_transaction_record
from txgraph.ports.address_data_port import AddressDataPort

logger = logging.getLogger(__name__)


class NowNodesAdapter(AddressDataPort):
    """
    Blockbook-style REST client (NOWNodes btcbook).

    One GET per call: no retry, no caching.
    """

    def __init__(
        self,
        base_url: str = NOWNODES_BASE_URL,
        timeout_sec: int = NOWNODES_TIMEOUT_SEC,
        requests_per_sec: float = NOWNODES_REQUESTS_PER_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_sec
        self._pacer = RequestPacer(requests_per_sec)
        self._session = session or requests.Session()

    # ---------- internal ----------

    def _get(self, path: str, credential: str) -> requests.Response:
        url = f"{self._base_url}/{path.lstrip('/')}"
        self._pacer.wait()
        logger.debug("GET %s", url)
        try:
            resp = self._session.get(
                url,
                headers={NOWNODES_CREDENTIAL_HEADER: credential},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(f"Request to {url} failed: {e}") from e
        logger.debug("GET %s -> %s", url, resp.status_code)
        return resp

    @staticmethod
    def _json(resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponse(f"Response from {resp.url} is not JSON: {e}") from e

    @staticmethod
    def _provider_error(resp: requests.Response, what: str) -> ProviderError:
        return ProviderError(
            f"Provider returned HTTP {resp.status_code} for {what}",
            status=resp.status_code,
            body=resp.text,
        )

    # ---------- port methods ----------

    def fetch_address(self, address: str, credential: str) -> AddressRecord:
        resp = self._get(f"address/{address}", credential)

        if resp.status_code == 400:
            raise InvalidAddress(f"Address provided is not a Bitcoin wallet: {address}")
        if resp.status_code == 401:
            raise InvalidCredential("Your API key didn't work")
        if resp.status_code != 200:
            raise self._provider_error(resp, f"address {address}")

        return parse_address_record(self._json(resp))

    def fetch_transaction(self, txid: str, credential: str) -> TransactionRecord:
        resp = self._get(f"tx/{txid}", credential)

        if resp.status_code != 200:
            raise self._provider_error(resp, f"transaction {txid}")

        return parse_transaction_record(self._json(resp), txid=txid)
