from typing import Optional

from loguru import logger
from solders.keypair import Keypair

from key_converter import encode_key, parse_json_array


def load_wallet_bytes(wallet_path):
    with open(wallet_path, "r") as f:
        return parse_json_array(f.read())


def wallet_to_base58(wallet_path):
    """Re-encode a wallet JSON file as a base58 private key"""
    return encode_key(load_wallet_bytes(wallet_path))


def describe_keypair(key_bytes: bytes) -> Optional[str]:
    """Return the public key if the bytes form a 64-byte Solana keypair"""
    if len(key_bytes) != 64:
        logger.warning(f"⚠️  Key is {len(key_bytes)} bytes, not a 64-byte Solana keypair")
        return None
    try:
        keypair = Keypair.from_bytes(bytes(key_bytes))
    except ValueError as e:
        logger.warning(f"⚠️  Bytes are not a valid keypair: {e}")
        return None
    return str(keypair.pubkey())
