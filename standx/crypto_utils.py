"""Hashing, hex, base58/base64 and Ethereum address helpers."""

from __future__ import annotations

import base64
import string

from Crypto.Hash import keccak

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_B64_INDEX = {ch: index for index, ch in enumerate(_B64_ALPHABET)}
_HEX_DIGITS = frozenset(string.hexdigits)


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def hex_to_bytes(hex_string: str) -> bytes:
    """Decode a hex string, with or without a ``0x`` prefix."""
    text = hex_string
    if len(text) >= 2 and text[0] == "0" and text[1] in "xX":
        text = text[2:]
    if len(text) % 2:
        raise ValueError("invalid hex length")
    if not set(text) <= _HEX_DIGITS:
        raise ValueError("invalid hex character")
    return bytes.fromhex(text)


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex without a prefix."""
    return bytes(data).hex()


def base58_encode(data: bytes) -> str:
    """Encode bytes with the Bitcoin base58 alphabet."""
    raw = bytes(data)
    stripped = raw.lstrip(b"\x00")
    zeros = len(raw) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(BASE58_ALPHABET[remainder])
    return "1" * zeros + "".join(reversed(digits))


def base64_encode(data: bytes) -> str:
    """Encode bytes as standard padded base64."""
    return base64.b64encode(bytes(data)).decode("ascii")


def base64url_decode(text: str) -> bytes:
    """Decode base64url text, padded or not.

    Decoding stops at the first character outside the alphabet, so any
    trailing padding or junk is ignored.
    """
    normalized = text.replace("-", "+").replace("_", "/")
    accumulator = 0
    bits = 0
    out = bytearray()
    for ch in normalized:
        value = _B64_INDEX.get(ch)
        if value is None:
            break
        accumulator = (accumulator << 6) | value
        bits += 6
        if bits >= 8:
            bits -= 8
            out.append((accumulator >> bits) & 0xFF)
            accumulator &= (1 << bits) - 1
    return bytes(out)


def eip55_checksum_address(addr_bytes: bytes) -> str:
    """Format a 20-byte address in EIP-55 mixed-case checksum form."""
    raw = bytes(addr_bytes)
    if len(raw) != 20:
        raise ValueError("address must be 20 bytes")
    addr_hex = raw.hex()
    digest = keccak256(addr_hex.encode("ascii")).hex()
    checksummed = (
        ch.upper() if ch in "abcdef" and int(nibble, 16) >= 8 else ch
        for ch, nibble in zip(addr_hex, digest)
    )
    return "0x" + "".join(checksummed)


def derive_eth_address(pubkey_uncompressed: bytes) -> str:
    """Derive the checksummed Ethereum address of a 65-byte uncompressed key."""
    raw = bytes(pubkey_uncompressed)
    if len(raw) != 65:
        raise ValueError("uncompressed public key must be 65 bytes")
    digest = keccak256(raw[1:65])
    return eip55_checksum_address(digest[12:])