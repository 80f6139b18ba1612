"""Application constants."""

MIN_FIELDS = 9
STATUSES = ("New", "Updated", "Archived")
CONTACTS = ("Close", "Casual", "Monitor")
STATES = ("ACT", "NSW", "VIC", "TAS", "SA", "WA", "NT", "QLD")
SUBURB_LITERALS = ("Public Transport",)
EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "event",
    "status",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
