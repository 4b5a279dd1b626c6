# match defaults
DEFAULT_EXTRA_TIME = "00:00"

# MM:SS where MM is 0-99 and SS is 00-59
TIME_FORMAT_PATTERN = r"[0-9]{1,2}:[0-5][0-9]"

# response / error messages
MSG_FIELDS_REQUIRED = "All fields are required"
MSG_INVALID_TIME_FORMAT = "Invalid time format. Use MM:SS"
MSG_MATCH_NOT_FOUND = "Match not found"
MSG_TEAM_NOT_IN_MATCH = "Team does not belong to this match"
MSG_EXTRA_TIME_REQUIRED = "Extra time is required"
MSG_EXTRA_TIME_UPDATED = "Extra time updated successfully"
MSG_INVALID_REQUEST = "Invalid request"

# ids are stored as signed 64-bit integers
MIN_MATCH_ID = -(2 ** 63)
MAX_MATCH_ID = 2 ** 63 - 1
