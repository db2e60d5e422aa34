"""Application constants."""

DEFAULT_ENCODING = "latin-1"
DEFAULT_EXTENSION = ".dsn"
DEFAULT_SEPARATOR = "S20.G00.05.001,'01'\r\n"
DEFAULT_MARKER_DELIMITER = ","
DEFAULT_MARKERS = {
    "pay_period": "S20.G00.05.005",
    "establishment_id": "S21.G00.06.001",
    "activity_code": "S21.G00.06.002",
}
DEFAULT_ARCHIVE_SUFFIX = "_dsn.zip"
DEFAULT_ENTRY_EXTENSION = ".dsn"
FORMAT_CONFIG_FILENAME = "dsn_format.yml"

# Fixed zip entry timestamp, earliest value the zip format can store.
ZIP_ENTRY_DATE_TIME = (1980, 1, 1, 0, 0, 0)

EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "organization",
    "event",
    "status",
    "duration_ms",
    "files_in",
    "records_out",
    "error_code",
    "message",
)
