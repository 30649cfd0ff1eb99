from typing import Final
from dotenv import load_dotenv
import os

# Load environment variables from .env
load_dotenv()


DATABASE_URL: Final = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is not set")

REDIS_URL: Final = os.getenv("REDIS_URL")

if not REDIS_URL:
    raise ValueError("REDIS_URL environment variable is not set")


# Sessions are written by the login service under this prefix.
SESSION_KEY_PREFIX: Final = os.getenv("SESSION_KEY_PREFIX", "session:")

# The flow controller subscribes here and emits the gratuitous ARP.
ANNOUNCE_CHANNEL: Final = os.getenv("ANNOUNCE_CHANNEL", "arp:announce")

LOG_LEVEL: Final = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FILE: Final = os.getenv("LOG_FILE")
