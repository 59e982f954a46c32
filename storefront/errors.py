"""
Common Notice Constants

Centralized message templates so the wording of each event lives in one place.
None of these are raised: out-of-stock and underflow are handled locally and
only reported.
"""

# Stock notices
NOTICE_OUT_OF_STOCK = "Error: Product ID {item_id} is out of stock!"
NOTICE_HANDLING_FEE = "Electronics handling fee applied for ID {item_id}."
NOTICE_STOCK_UPDATED = "Stock for ID {item_id} changed by {delta}: {old} -> {new}"
NOTICE_STOCK_CLAMPED = "Stock for ID {item_id} clamped at 0 (requested change {delta})"

# Cart notices
NOTICE_ITEM_ADDED = "Product ID {item_id} added to cart at {price}"
NOTICE_CART_DISCOUNT = "Discount of {percent}% applied to cart."

# Construction errors
ERROR_NEGATIVE_STOCK = "stock must be a non-negative integer"
ERROR_NEGATIVE_PRICE = "price must be a non-negative number"
ERROR_INVALID_PRICE = "price must be a finite number"
