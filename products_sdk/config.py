# products_sdk/config.py
import os

# Where the products API lives. Defaults match the local dev server.
API_HOST = os.getenv("PRODUCTS_API_HOST", "localhost")
API_PORT = int(os.getenv("PRODUCTS_API_PORT", 3000))
REQUEST_TIMEOUT = float(os.getenv("PRODUCTS_API_TIMEOUT", 10))

# Pause between demo steps, in seconds
STEP_DELAY = float(os.getenv("DEMO_STEP_DELAY", 2))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def base_url(host: str = API_HOST, port: int = API_PORT) -> str:
    return f"http://{host}:{port}"
