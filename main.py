import sys
from loguru import logger

from key_converter import KeyConversionError, convert_and_persist
from wallet_utils import describe_keypair

CONFIRMATION = "✅ Turbin3-wallet.json created from .env key!"


# --- Logging ke stderr ---
def setup_logging(level="INFO"):
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} - {level} - {message}"
    )


# --- Main ---
def main():
    setup_logging()
    try:
        key_bytes = convert_and_persist()
    except KeyConversionError as e:
        logger.error(f"❌ {e}")
        return 1

    pubkey = describe_keypair(key_bytes)
    if pubkey:
        logger.info(f"📍 Public Key: {pubkey}")

    print(CONFIRMATION)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
