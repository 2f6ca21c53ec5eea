import os

from dotenv import load_dotenv

from enums.runtime_environment import RuntimeEnvironment

# Load .env but don't override existing environment variables
# This allows test scripts to set RUNTIME_ENVIRONMENT=TEST before import
load_dotenv(".env", override=False)

# Parse RUNTIME_ENVIRONMENT with clear error message on misconfiguration
try:
    _runtime_env_str = os.environ.get("RUNTIME_ENVIRONMENT")
    if not _runtime_env_str:
        raise ValueError("RUNTIME_ENVIRONMENT environment variable is not set")
    RUNTIME_ENVIRONMENT = RuntimeEnvironment(_runtime_env_str)
except ValueError as e:
    valid_values = [env.value for env in RuntimeEnvironment]
    import sys
    print(f"\n ERROR: Invalid RUNTIME_ENVIRONMENT configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Valid values: {', '.join(valid_values)}", file=sys.stderr)
    print(f"Current value: {os.environ.get('RUNTIME_ENVIRONMENT', '(not set)')}", file=sys.stderr)
    print(f"\nAdd to .env: RUNTIME_ENVIRONMENT={valid_values[0]}\n", file=sys.stderr)
    sys.exit(1)

# Backend API
API_URL = os.environ.get("API_URL", "https://evershinebackend-2.onrender.com").rstrip("/")
API_TIMEOUT_SECONDS = float(os.environ.get("API_TIMEOUT_SECONDS", "30"))

# Parse CHARGES_DEBOUNCE_SECONDS with error handling
try:
    CHARGES_DEBOUNCE_SECONDS = float(os.environ.get("CHARGES_DEBOUNCE_SECONDS", "1.0"))
    if CHARGES_DEBOUNCE_SECONDS < 0:
        raise ValueError(f"CHARGES_DEBOUNCE_SECONDS must not be negative (got: {CHARGES_DEBOUNCE_SECONDS})")
except ValueError as e:
    import sys
    print(f"\n ERROR: Invalid CHARGES_DEBOUNCE_SECONDS configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected: Non-negative number of seconds (e.g., 0.5, 1.0)", file=sys.stderr)
    print(f"Current value: {os.environ.get('CHARGES_DEBOUNCE_SECONDS', '(not set)')}\n", file=sys.stderr)
    sys.exit(1)

# Additional charges used when the backend returns a cart without any
# (strings, parsed as Decimal by ChargesConfig)
DEFAULT_LOADING_FEE = os.environ.get("DEFAULT_LOADING_FEE", "1000")
DEFAULT_WOOD_PACKAGING = os.environ.get("DEFAULT_WOOD_PACKAGING", "1500")  # Basic tier
DEFAULT_TRANSPORT_ADVANCE = os.environ.get("DEFAULT_TRANSPORT_ADVANCE", "15000")
DEFAULT_GST_RATE = os.environ.get("DEFAULT_GST_RATE", "18")

# Checkout
DEFAULT_PAYMENT_METHOD = os.environ.get("DEFAULT_PAYMENT_METHOD", "bank_transfer")
FOLLOW_UP_COMMENT_MAX_LENGTH = int(os.environ.get("FOLLOW_UP_COMMENT_MAX_LENGTH", "500"))

# Display
LANGUAGE = os.environ.get("LANGUAGE", "en")  # Default to English
CURRENCY_SYMBOL = os.environ.get("CURRENCY_SYMBOL", "₹")

# Logging Configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"  # Mask tokens and PII in logs

# Log Retention: Environment-specific defaults
# Dev: keep a month for debugging
# Prod: Use 5 days default to save disk space
if RUNTIME_ENVIRONMENT == RuntimeEnvironment.DEV:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "30"))
else:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "5"))
