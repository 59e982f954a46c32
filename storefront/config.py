"""
Settings Module - Environment-driven configuration

Values are read once on import. Override them through environment
variables before importing the package.
"""

import os

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
# "simple" drops the timestamp; "detailed" keeps it
LOG_FORMAT_STYLE = os.environ.get("STOREFRONT_LOG_FORMAT", "detailed").lower()

# Display currency for printed prices
DISPLAY_CURRENCY = os.environ.get("STOREFRONT_CURRENCY", "USD").upper()
