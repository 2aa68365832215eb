"""Tests for CSV export."""

from datetime import datetime, timezone

from ledger.services.export import HEADER, export_csv, format_cell

EXPECTED_HEADER = (
    "id,date,pair,side,entry,exit,size,leverage,takeProfit,stopLoss,"
    "notes,profit,roi,createdAt,updatedAt"
)


def test_header_only_for_empty_ledger():
    assert HEADER == EXPECTED_HEADER
    assert export_csv(()) == EXPECTED_HEADER


def test_full_row(make_record):
    stamp = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    record = make_record(
        id=7,
        exit=110.5,
        size=2.0,
        stop_loss=95.0,
        notes='He said "go"',
        profit=21.0,
        roi=10.5,
        created_at=stamp,
        updated_at=stamp,
    )
    lines = export_csv((record,)).split("\n")
    assert lines[0] == EXPECTED_HEADER
    assert lines[1] == (
        '7,"2024-03-01T10:00:00+00:00","BTC/USDT","Long",100,110.5,2,1,,95,'
        '"He said ""go""",21,10.5,"2024-03-01T12:00:00+00:00","2024-03-01T12:00:00+00:00"'
    )


def test_embedded_quotes_are_doubled():
    assert format_cell('He said "go"') == '"He said ""go"""'


def test_commas_and_newlines_stay_inside_quotes():
    assert format_cell("a,b\nc") == '"a,b\nc"'


def test_cells_by_type():
    assert format_cell(None) == ""
    assert format_cell(0.0) == "0"
    assert format_cell(-12.75) == "-12.75"
    assert format_cell(3) == "3"
    assert format_cell("") == '""'


def test_rows_follow_input_order(make_record):
    records = (make_record(pair="ZEC/USDT"), make_record(pair="ADA/USDT"), make_record(pair="BTC/USDT"))
    rows = export_csv(records).split("\n")[1:]
    assert [row.split(",")[2] for row in rows] == ['"ZEC/USDT"', '"ADA/USDT"', '"BTC/USDT"']


def test_screenshot_is_not_exported(make_record):
    csv_text = export_csv((make_record(screenshot="data:image/png;base64,QUJD"),))
    assert "base64" not in csv_text
