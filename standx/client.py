"""StandX perpetuals REST client with bearer login and signed order bodies."""

from __future__ import annotations

import json
import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from standx.http_client import HttpClient

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://perps.standx.com"
SIGN_VERSION = "v1"

LoginCallable = Callable[[], str]
SignCallable = Callable[[str], str]


class NotLoggedInError(RuntimeError):
    """Raised when an authenticated endpoint is called before login."""

    def __init__(self) -> None:
        super().__init__("not logged in, call login() first")


def generate_request_id() -> str:
    """Return a random version-4 UUID string used as a request id."""
    return str(uuid.uuid4())


def build_signed_headers(
    body: str,
    sign: SignCallable,
    request_id: str | None = None,
    timestamp: str | None = None,
) -> dict[str, str]:
    """Sign ``{version},{id},{timestamp},{body}`` and return the request headers.

    A request id and a millisecond timestamp are generated when not given.
    """
    if request_id is None:
        request_id = generate_request_id()
    if timestamp is None:
        timestamp = str(time.time_ns() // 1_000_000)
    message = f"{SIGN_VERSION},{request_id},{timestamp},{body}"
    signature = sign(message)
    logger.debug(
        "signing body=%s request_id=%s timestamp=%s message=%s signature=%s",
        body,
        request_id,
        timestamp,
        message,
        signature,
    )
    return {
        "x-request-sign-version": SIGN_VERSION,
        "x-request-id": request_id,
        "x-request-timestamp": timestamp,
        "x-request-signature": signature,
    }


def _dump_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


class StandXClient:
    """Query account data and place or cancel orders on the StandX API.

    ``login`` obtains a fresh access token; ``signer`` turns a message into a
    base64 signature for order bodies. The HTTP client refreshes the token
    through ``login`` when the server answers 401.
    """

    def __init__(
        self,
        login: LoginCallable,
        signer: SignCallable,
        http: HttpClient | None = None,
        api_base_url: str = DEFAULT_API_BASE_URL,
    ) -> None:
        self._login = login
        self._sign = signer
        self._http = http if http is not None else HttpClient()
        self._http.token_refresh_callback = self.login
        self.api_base_url = api_base_url
        self._access_token = ""

    def __enter__(self) -> StandXClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the HTTP client."""
        self._http.close()

    @property
    def access_token(self) -> str:
        """The current access token, empty before login."""
        return self._access_token

    def login(self) -> str:
        """Log in, store the access token and return it."""
        self._access_token = self._login()
        return self._access_token

    def _require_login(self) -> None:
        if not self._access_token:
            raise NotLoggedInError()

    def _get_authenticated(self, path: str) -> str:
        self._require_login()
        return self._http.get_with_auth(self.api_base_url + path, self._access_token)

    @staticmethod
    def _with_symbol(path: str, symbol: str) -> str:
        return f"{path}?symbol={symbol}" if symbol else path

    def query_balance(self) -> str:
        """Return the account balance document."""
        return self._get_authenticated("/api/query_balance")

    def query_positions(self, symbol: str = "") -> str:
        """Return open positions, optionally for one symbol."""
        return self._get_authenticated(self._with_symbol("/api/query_positions", symbol))

    def query_order(self, order_id: int | None = None, cl_ord_id: str = "") -> str:
        """Return one order, looked up by order id and/or client order id."""
        self._require_login()
        has_order_id = order_id is not None and order_id >= 0
        if not has_order_id and not cl_ord_id:
            raise ValueError("at least one of order_id or cl_ord_id is required")
        params = []
        if has_order_id:
            params.append(f"order_id={order_id}")
        if cl_ord_id:
            params.append(f"cl_ord_id={cl_ord_id}")
        return self._get_authenticated("/api/query_order?" + "&".join(params))

    def query_open_orders(self, symbol: str = "") -> str:
        """Return open orders, optionally for one symbol."""
        return self._get_authenticated(self._with_symbol("/api/query_open_orders", symbol))

    def query_symbol_price(self, symbol: str) -> str:
        """Return the price of ``symbol``; no login is needed."""
        if not symbol:
            raise ValueError("symbol is required for query_symbol_price")
        url = f"{self.api_base_url}/api/query_symbol_price?symbol={symbol}"
        return self._http.get(url)

    def _post_signed(self, path: str, payload: dict[str, Any]) -> str:
        body = _dump_json(payload)
        headers = build_signed_headers(body, self._sign)
        return self._http.post_json_with_auth(
            self.api_base_url + path, body, self._access_token, headers
        )

    def new_order(
        self,
        symbol: str,
        side: str,
        order_type: str,
        qty: str,
        time_in_force: str,
        reduce_only: bool,
        price: str = "",
    ) -> str:
        """Place a new order with a signed body."""
        self._require_login()
        if not (symbol and side and order_type and qty and time_in_force):
            raise ValueError("symbol, side, order_type, qty, and time_in_force are required")
        order: dict[str, Any] = {
            "symbol": symbol,
            "side": side,
            "order_type": order_type,
            "qty": qty,
            "time_in_force": time_in_force,
            "reduce_only": reduce_only,
        }
        if price:
            order["price"] = price
        return self._post_signed("/api/new_order", order)

    def cancel_order(self, order_id: int | None = None, cl_ord_id: str = "") -> str:
        """Cancel an order by order id and/or client order id."""
        self._require_login()
        has_order_id = order_id is not None and order_id >= 0
        if not has_order_id and not cl_ord_id:
            raise ValueError("at least one of order_id or cl_ord_id is required")
        request: dict[str, Any] = {}
        if has_order_id:
            request["order_id"] = order_id
        if cl_ord_id:
            request["cl_ord_id"] = cl_ord_id
        return self._post_signed("/api/cancel_order", request)