from dsn_converter.common.config_loader import FieldMarkers
from dsn_converter.pipeline.extract import extract_field, extract_fields, format_period_key

MARKERS = FieldMarkers(
    pay_period="S20.G00.05.005",
    establishment_id="S21.G00.06.001",
    activity_code="S21.G00.06.002",
)


def test_extract_field_returns_unquoted_value(make_record):
    record = make_record(establishment_id="987654321")
    assert extract_field(record, "S21.G00.06.001") == "987654321"


def test_extract_field_is_deterministic(make_record):
    record = make_record()
    first = extract_field(record, "S20.G00.05.005")
    assert first == "01012023"
    assert all(extract_field(record, "S20.G00.05.005") == first for _ in range(3))


def test_extract_field_missing_marker_returns_empty_string(make_record):
    record = make_record(activity_code=None)
    assert extract_field(record, "S21.G00.06.002") == ""


def test_extract_field_stops_at_whitespace():
    assert extract_field("S21.G00.06.001,'123' trailing", "S21.G00.06.001") == "123"


def test_extract_field_keeps_unquoted_values():
    assert extract_field("S21.G00.06.002,ABC\r\n", "S21.G00.06.002") == "ABC"


def test_extract_field_needs_delimiter_after_marker():
    assert extract_field("S21.G00.06.0010,'x'\r\n", "S21.G00.06.001") == ""


def test_extract_fields_reads_all_three_markers(make_record):
    fields = extract_fields(make_record(pay_period="01022023", establishment_id="444555666", activity_code="00012"), MARKERS)
    assert fields.pay_period == "01022023"
    assert fields.establishment_id == "444555666"
    assert fields.activity_code == "00012"


def test_format_period_key_reorders_without_calendar_check():
    assert format_period_key("01012023") == "2023-01-01"
    assert format_period_key("31042023") == "2023-04-31"


def test_format_period_key_tolerates_empty_value():
    assert format_period_key("") == "--"
