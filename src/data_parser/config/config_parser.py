# config_parser.py
"""
Configuration constants
"""
# ==============================================================
# Input settings
# ==============================================================
# Software version
VERSION = "1.0.0"

# Typing this (any case) at any prompt aborts the input flow
EXIT_KEYWORD = "exit"

# Accepted date patterns, tried in order. First match wins.
# Tokens: DD/D day, MM/M month, YYYY/YY year. Anything else is literal.
DEFAULT_DATE_FORMATS = [
    "DD/MM/YYYY", "DD-MM-YYYY", "DD.MM.YYYY",
    "DDMMYYYY", "DD MM YYYY",
    "D/M/YY", "D-M-YY", "D.M.YY",
    "DMYY", "D M YY",
]

# Two digit years map into the century ending at this year
TWO_DIGIT_YEAR_MAX = 2049

# 32-bit signed range - anything outside is treated as invalid input
INT_MIN = -2**31
INT_MAX = 2**31 - 1

# Intentionally permissive, not RFC 5322
EMAIL_PATTERN = r"^[\w\-\.]+@([\w-]+\.)+[\w-]{2,4}$"

# ==============================================================
# Timed input
# ==============================================================
TIMEOUT_SECONDS = 30                 # Default budget for timed prompts, in seconds
EMPTY_READ_PAUSE = 0.05               # Wait after an empty read; end of input reads empty at once

# ==============================================================
# Messages
# ==============================================================
INTEGER_ERROR = "Please enter a valid integer."
DOUBLE_ERROR = "Please enter a valid double."
STRING_ERROR = "Input cannot be empty."
EMAIL_ERROR = "Please enter a valid email address."
DATE_ERROR = "Invalid date. Please enter a date in one of the following formats: {formats}"
TIMEOUT_MESSAGE = "Input timed out."
CANCELLED_MESSAGE = "User requested termination."
END_OF_INPUT_MESSAGE = "Unexpected end of input."

# ==============================================================
# Logging
# ==============================================================
LOG_FILE = "error.log"

# ==============================================================
# Optional: local overrides
# Local configuration file overrides standard config values

# ==============================================================
try:
    from data_parser.config.config_local import *
except ImportError:
    pass  # No local config - use defaults above
