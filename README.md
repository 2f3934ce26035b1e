# standx

A small Python library for the StandX perpetuals REST API.

It provides:

- **Market data**: `StandXClient.query_symbol_price`, which needs no login.
- **Account queries**: balance, positions, a single order, and open orders.
- **Trading**: placing and cancelling orders. Each request body is signed, and the
  `x-request-*` headers the API expects are attached to the request.
- **Automatic re-login**: if an authenticated request gets HTTP 401, the client asks
  for a new access token once and retries the request.
- **Crypto helpers**: Keccak-256, hex, Base58, Base64 and Base64url, EIP-55 checksum
  addresses, and Ethereum address derivation from an uncompressed secp256k1 public key.
- **`.env` reading**: a minimal reader for files of `KEY=value` lines.

Install it with your usual installer. It depends on `requests` and `pycryptodome`.

## What the package does not do

- **Wallet login.** The package does not sign in with a wallet. You supply a `login`
  callable that returns an access token.
- **Key handling and signing.** The package does not hold keys or create signatures.
  You supply a `signer` callable that signs a message and returns the signature as
  base64.
- **Command-line program.** The package installs no command. It is a library only.

## Usage

```python
from standx.client import StandXClient, NotLoggedInError
from standx.http_client import HttpError


def obtain_token() -> str:
    # Run your login flow and return the access token.
    return "token"


def sign(message: str) -> str:
    # Sign `message` with your request key and return the signature as base64.
    return "c2lnbmF0dXJl"


with StandXClient(login=obtain_token, signer=sign) as client:
    print(client.query_symbol_price("ETH-USD"))   # public endpoint

    client.login()                                # stores client.access_token
    print(client.query_balance())
    print(client.query_positions("ETH-USD"))
    print(client.query_open_orders())
    print(client.query_order(order_id=12345))

    client.new_order(
        symbol="ETH-USD",
        side="buy",
        order_type="limit",
        qty="0.001",
        time_in_force="alo",
        reduce_only=False,
        price="3000",
    )
    client.cancel_order(order_id=12345)
```

### Return values

- Every query and order method returns the response body as a string. It is not
  parsed.
- A non-2xx status does not raise. The status of the last request is kept in
  `HttpClient.last_response_code`.

### Optional arguments

- The `symbol` argument to `query_positions` and `query_open_orders` is optional.
  When it is given, it is sent as `?symbol=...`.
- `query_order` and `cancel_order` take `order_id`, `cl_ord_id`, or both. An
  `order_id` of `None` or a negative number counts as not given.
- The base URL defaults to `https://perps.standx.com`. Change it with
  `api_base_url=`.

### Passing your own HTTP client

You can pass your own `HttpClient` as `http=`. It can wrap a custom
`requests.Session`:

```python
import requests
from standx.http_client import HttpClient

http = HttpClient(session=requests.Session())
client = StandXClient(login=obtain_token, signer=sign, http=http)
```

### Errors

| Situation | Exception |
| --- | --- |
| An authenticated call before `login()` | `NotLoggedInError` (a `RuntimeError`) |
| Neither `order_id` nor `cl_ord_id` given | `ValueError` |
| An empty symbol given to `query_symbol_price` | `ValueError` |
| An empty required field given to `new_order` | `ValueError` |
| A transport failure (connection, timeout, ...) | `HttpError` |

### HTTP client and retries

`HttpClient` has these methods:

- `get`
- `get_with_auth`
- `post_json`
- `post_json_with_auth` (takes optional `extra_headers`)
- `delete_with_auth`

It can be used as a context manager.

A request that carries an `Authorization` header is retried once when both of these
hold:

- the server answers 401;
- `token_refresh_callback` is set.

`StandXClient` sets `token_refresh_callback` to its own `login`. The retried request
carries only two headers:

- the new bearer token;
- `Content-Type` for POST, or `Accept` otherwise.

Extra headers, such as the signature headers, are not sent again on the retry.

### Signed requests

Order bodies are serialised as compact JSON with sorted keys. The signed message has
this form:

```
v1,{request_id},{timestamp_ms},{json_body}
```

The headers sent with it are:

- `x-request-sign-version`
- `x-request-id`
- `x-request-timestamp`
- `x-request-signature`

`build_signed_headers(body, sign, request_id=None, timestamp=None)` builds these
headers. `generate_request_id()` returns a random UUID4 string. You can use both on
their own.

### Crypto helpers

```python
from standx.crypto_utils import (
    keccak256, hex_to_bytes, bytes_to_hex, base58_encode,
    base64_encode, base64url_decode, eip55_checksum_address, derive_eth_address,
)

bytes_to_hex(keccak256(b""))
# 'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'

eip55_checksum_address(hex_to_bytes("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"))
# '0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed'
```

Their errors:

- `hex_to_bytes` accepts an optional `0x` prefix. It raises `ValueError` for an odd
  length or a non-hex character.
- `eip55_checksum_address` raises `ValueError` unless given exactly 20 bytes.
- `derive_eth_address` raises `ValueError` unless given exactly 65 bytes.

`base64url_decode` accepts padded or unpadded input. It stops at the first character
outside the alphabet.

### Environment files

```python
from standx.env import load_env, parse_env_line

config = load_env(".env")
chain = config.get("CHAIN")

parse_env_line('KEY = "value"')   # ('KEY', 'value')
```

`load_env` follows these rules:

- Blank lines and lines whose first non-blank character is `#` are skipped.
- Lines without `=` are skipped.
- Keys and values are trimmed of surrounding whitespace.
- One pair of matching single or double quotes around a value is removed.
- A missing or unreadable file gives an empty mapping.