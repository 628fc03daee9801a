import os
import sys
from decimal import Decimal, InvalidOperation

from dotenv import load_dotenv

from enums.runtime_environment import RuntimeEnvironment
from enums.storage_backend import StorageBackendType

# Load .env but don't override existing environment variables
# This allows test runs to set RUNTIME_ENVIRONMENT=TEST before import
load_dotenv(".env", override=False)


def _exit_on_invalid(name: str, reason: Exception, valid_values: list[str] | None = None):
    print(f"\n ERROR: Invalid {name} configuration\n", file=sys.stderr)
    print(f"Reason: {reason}", file=sys.stderr)
    if valid_values:
        print(f"Valid values: {', '.join(valid_values)}", file=sys.stderr)
    print(f"Current value: {os.environ.get(name, '(not set)')}\n", file=sys.stderr)
    sys.exit(1)


# Parse RUNTIME_ENVIRONMENT with clear error message on misconfiguration
try:
    RUNTIME_ENVIRONMENT = RuntimeEnvironment(os.environ.get("RUNTIME_ENVIRONMENT", RuntimeEnvironment.DEV.value))
except ValueError as e:
    _exit_on_invalid("RUNTIME_ENVIRONMENT", e, [env.value for env in RuntimeEnvironment])

# Storage backend: "sql" (relational) or "local" (JSON key-value file)
try:
    STORAGE_BACKEND = StorageBackendType(os.environ.get("STORAGE_BACKEND", StorageBackendType.SQL.value))
except ValueError as e:
    _exit_on_invalid("STORAGE_BACKEND", e, [backend.value for backend in StorageBackendType])

DB_NAME = os.environ.get("DB_NAME", "storefront.db")
DB_URL = os.environ.get("DB_URL") or f"sqlite+aiosqlite:///data/{DB_NAME}"
LOCAL_STORAGE_PATH = os.environ.get("LOCAL_STORAGE_PATH", "data/local_storage.json")

# Checkout Pricing Configuration
# Amounts are whole currency units
try:
    TAX_RATE = Decimal(os.environ.get("TAX_RATE", "0.18"))
    if TAX_RATE < 0:
        raise ValueError("TAX_RATE must not be negative")
except (InvalidOperation, ValueError) as e:
    _exit_on_invalid("TAX_RATE", e)

try:
    FREE_SHIPPING_THRESHOLD = int(os.environ.get("FREE_SHIPPING_THRESHOLD", "40000"))  # Strict: subtotal must exceed it
    FLAT_SHIPPING_FEE = int(os.environ.get("FLAT_SHIPPING_FEE", "4999"))
except ValueError as e:
    _exit_on_invalid("FREE_SHIPPING_THRESHOLD/FLAT_SHIPPING_FEE", e)

# Simulated payment processing delay at checkout (not cancellable)
CHECKOUT_PROCESSING_DELAY_SECONDS = float(os.environ.get("CHECKOUT_PROCESSING_DELAY_SECONDS", "1.5"))

# Catalog Configuration
DEFAULT_PRODUCT_IMAGE = os.environ.get(
    "DEFAULT_PRODUCT_IMAGE",
    "https://images.unsplash.com/photo-1555041469-a586c61ea9bc?w=600&h=600&fit=crop"
)

# Logging Configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"  # Mask card data, addresses, emails

# Log Retention: Environment-specific defaults
# Dev: keep 30 days for debugging
# Prod: 5 days default to save disk space
if RUNTIME_ENVIRONMENT == RuntimeEnvironment.DEV:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "30"))
else:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "5"))
