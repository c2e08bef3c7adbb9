"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PRODUCTS_KEY = "wagewise-products"
DAILY_LOGS_KEY = "wagewise-daily-logs"
LEDGER_KEY = "wagewise-employee-ledger"
EMPLOYEES_KEY = "wagewise-employees"
NAME_HISTORY_KEY = "wagewise-employee-name-history"

PRODUCT_NAME_MAX_LENGTH = 50
DEFAULT_NAME_HISTORY_LIMIT = 20
DEFAULT_STATUS_MESSAGE_SECONDS = 2

CURRENCY_SYMBOL = "₹"
STORAGE_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
