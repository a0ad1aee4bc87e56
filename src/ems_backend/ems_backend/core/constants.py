"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

USERS_COLLECTION = "users"

TOKEN_EXPIRY_DAYS = 7
TOKEN_ALGORITHM = "HS256"

EMPLOYEE_ID_SEQUENCE_WIDTH = 4

NOT_RECORDED = "Not Recorded"
NO_PAYROLL = "N/A"
