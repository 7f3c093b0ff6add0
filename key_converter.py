"""
Convert a Phantom base58 private key into a Solana CLI wallet file.

The key is read from PHANTOM_PRIVATE_KEY (env or .env), decoded with plain
base58 (no checksum) and written as a JSON array of byte values.
"""

import json
from typing import Optional

import base58
from loguru import logger

from config import Config, WALLET_OUTPUT_PATH
from utils import mask_key


class KeyConversionError(Exception):
    """Base error for a failed key conversion"""


class ConfigurationMissing(KeyConversionError):
    """PHANTOM_PRIVATE_KEY is not set or empty"""


class DecodeError(KeyConversionError):
    """Input is not valid base58 (or not a valid byte array)"""


class FileWriteError(KeyConversionError):
    """Wallet file could not be written"""


ALPHABET = base58.BITCOIN_ALPHABET.decode('ascii')


def decode_key(value: str) -> bytes:
    """Decode a base58 string into raw bytes"""
    # b58decode strips trailing whitespace, so check the alphabet first
    bad = value.strip(ALPHABET)
    if bad:
        raise DecodeError(f"Base58 decode failed: invalid character {bad[0]!r}")
    try:
        return base58.b58decode(value)
    except ValueError as e:
        raise DecodeError(f"Base58 decode failed: {e}") from e


def encode_key(data: bytes) -> str:
    """Encode raw bytes back into a base58 string"""
    return base58.b58encode(bytes(data)).decode('ascii')


def to_json_array(data: bytes) -> str:
    return json.dumps(list(data), separators=(',', ':'))


def parse_json_array(text: str) -> bytes:
    """Parse a wallet JSON array back into bytes"""
    try:
        values = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Wallet is not valid JSON: {e}") from e

    if not isinstance(values, list):
        raise DecodeError(f"Wallet must be a JSON array, got {type(values).__name__}")

    for v in values:
        # bool is an int subclass, reject it explicitly
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 255:
            raise DecodeError(f"Wallet array contains a non-byte value: {v!r}")

    return bytes(values)


def write_wallet(data: bytes, path: str = WALLET_OUTPUT_PATH):
    """Write bytes as a JSON array, replacing any existing file"""
    try:
        with open(path, 'w') as f:
            f.write(to_json_array(data))
    except OSError as e:
        raise FileWriteError(f"Could not write {path}: {e}") from e


def convert_and_persist(value: Optional[str] = None, output_path: str = WALLET_OUTPUT_PATH) -> bytes:
    """Read the base58 key, decode it and save it to the wallet file.

    ``value`` defaults to PHANTOM_PRIVATE_KEY as read at call time. Nothing is
    written unless the key is present and decodes cleanly.
    """
    if value is None:
        value = Config().PHANTOM_PRIVATE_KEY
    if not value:
        raise ConfigurationMissing("PHANTOM_PRIVATE_KEY not found in .env file")

    logger.debug(f"🔑 Decoding private key {mask_key(value)}")
    key_bytes = decode_key(value)
    logger.info(f"🔢 Decoded length: {len(key_bytes)} bytes")

    write_wallet(key_bytes, output_path)
    logger.info(f"💾 Wallet saved to {output_path}")
    return key_bytes
