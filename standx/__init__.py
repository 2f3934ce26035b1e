"""StandX perpetuals API client, HTTP helper, crypto helpers and .env reader."""

__version__ = "0.1.0"

__all__ = ["client", "crypto_utils", "env", "http_client"]