from dsn_converter.pipeline.codec import decode_bytes, encode_text
from dsn_converter.pipeline.segment import split_segments

SEPARATOR = "S20.G00.05.001,'01'\r\n"


def test_decode_bytes_maps_every_byte_and_encodes_back():
    raw = bytes(range(256))
    text = decode_bytes(raw, "latin-1")
    assert len(text) == 256
    assert encode_text(text, "latin-1") == raw


def test_decode_bytes_keeps_accented_characters():
    assert decode_bytes("Élève à Noël".encode("latin-1"), "latin-1") == "Élève à Noël"


def test_split_segments_round_trips_header_and_record():
    header = "S10.G00.00.001,'x'\r\n"
    record = "S20.G00.05.005,'01012023'\r\n"
    segments = split_segments(header + SEPARATOR + record, SEPARATOR)
    assert segments.header == header
    assert segments.records == [record]


def test_split_segments_preserves_record_order():
    text = "H" + SEPARATOR + "one" + SEPARATOR + "two" + SEPARATOR + "three"
    segments = split_segments(text, SEPARATOR)
    assert segments.header == "H"
    assert segments.records == ["one", "two", "three"]


def test_split_segments_without_separator_yields_header_only():
    segments = split_segments("just a header\r\n", SEPARATOR)
    assert segments.header == "just a header\r\n"
    assert segments.records == []


def test_split_segments_matches_periods_literally():
    near_miss = "S20XG00X05X001,'01'\r\n"
    segments = split_segments("H" + near_miss + "body", SEPARATOR)
    assert segments.records == []
