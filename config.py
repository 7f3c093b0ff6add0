import os
from dotenv import load_dotenv

load_dotenv()

# Output wallet file (Solana CLI keypair format)
WALLET_OUTPUT_PATH = './Turbin3-wallet.json'


class Config:
    def __init__(self):
        # Phantom private key (base58), read from env / .env
        self.PHANTOM_PRIVATE_KEY = os.getenv('PHANTOM_PRIVATE_KEY') or None

        # Wallet output
        self.WALLET_OUTPUT_PATH = WALLET_OUTPUT_PATH
