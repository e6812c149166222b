"""Tests for header resolution and body extraction."""

from conftest import FakeSchedule, FakeSectionType, FakeTableData

from scheduleporter.tools.extraction import (
    extract_cell_data,
    extract_schedule,
    parse_headers,
    placeholder_header,
)


class TestParseHeaders:
    """Test the three-step header fallback."""

    def test_header_section_text_preferred(self, section_types):
        """Test header cell text wins over field names."""
        schedule = FakeSchedule(
            "S", header=[["Mark", "Width"]], field_names=["F0", "F1"], body=[["a", "b"]]
        )
        structure = parse_headers(schedule, schedule.GetTableData(), 2, section_types)

        assert structure.headers == ["Mark", "Width"]
        assert structure.sources == ["header", "header"]
        assert structure.column_count == 2

    def test_field_names_when_header_blank(self, section_types):
        """Test blank header cells fall back to the field definition."""
        schedule = FakeSchedule(
            "S", header=[["Title", "  "]], field_names=["F0", "F1"], body=[["a", "b"]]
        )
        structure = parse_headers(schedule, schedule.GetTableData(), 2, section_types)

        assert structure.headers == ["Title", "F1"]
        assert structure.sources == ["header", "field"]

    def test_placeholder_when_nothing_available(self, section_types):
        """Test columns beyond the field list get Column_N."""
        schedule = FakeSchedule("S", field_names=["Only"], body=[["a", "b", "c"]])
        structure = parse_headers(schedule, schedule.GetTableData(), 3, section_types)

        assert structure.headers == ["Only", "Column_1", "Column_2"]
        assert structure.sources == ["field", "placeholder", "placeholder"]

    def test_failing_header_cell_falls_through(self, section_types):
        """Test an exception reading header text moves on to the field name."""
        schedule = FakeSchedule(
            "S",
            header=[["Mark", "Width"]],
            field_names=["F0", "F1"],
            body=[["a", "b"]],
            failing_cells={(FakeSectionType.Header, 0, 0)},
        )
        structure = parse_headers(schedule, schedule.GetTableData(), 2, section_types)

        assert structure.headers == ["F0", "Width"]

    def test_header_section_unavailable(self, section_types):
        """Test a header section that throws is treated as absent."""
        schedule = FakeSchedule("S", header=[["Mark"]], field_names=["F0"], body=[["a"]])
        table_data = FakeTableData(schedule.sections, failing={FakeSectionType.Header})

        structure = parse_headers(schedule, table_data, 1, section_types)

        assert structure.headers == ["F0"]

    def test_failing_field_definition_gives_placeholder(self, section_types):
        """Test a field lookup that throws yields Column_N."""
        schedule = FakeSchedule("S", field_names=["F0", "F1"], body=[["a", "b"]])

        def broken_field(index):
            raise RuntimeError("field unavailable")

        schedule.Definition.GetField = broken_field
        structure = parse_headers(schedule, schedule.GetTableData(), 2, section_types)

        assert structure.headers == ["Column_0", "Column_1"]
        assert structure.sources == ["placeholder", "placeholder"]

    def test_header_section_failure_names_schedule(self, section_types, caplog):
        schedule = FakeSchedule("Doors", header=[["Mark"]], field_names=["F0"], body=[["a"]])
        table_data = FakeTableData(schedule.sections, failing={FakeSectionType.Header})

        with caplog.at_level("INFO", logger="scheduleporter"):
            parse_headers(schedule, table_data, 1, section_types)

        messages = [record.raw_message for record in caplog.records]
        expected = "  -> Could not get header section for 'Doors': Header section unavailable"
        assert expected in messages

    def test_placeholder_format(self):
        """Test placeholder keys use the zero-based column index."""
        assert placeholder_header(0) == "Column_0"
        assert placeholder_header(12) == "Column_12"


class TestExtractCellData:
    """Test reading body rows."""

    def test_blank_rows_dropped(self, section_types):
        """Test rows with only blank cells are skipped."""
        schedule = FakeSchedule("S", body=[["a", "1"], ["", " "], ["b", "2"]])
        rows = extract_cell_data(schedule, 3, ["Name", "Qty"], section_types)

        assert rows == [{"Name": "a", "Qty": 1}, {"Name": "b", "Qty": 2}]

    def test_unreadable_cell_counts_as_blank(self, section_types):
        """Test a cell that throws is recorded as an empty string."""
        schedule = FakeSchedule(
            "S",
            body=[["a", "5mm"]],
            failing_cells={(FakeSectionType.Body, 0, 1)},
        )
        rows = extract_cell_data(schedule, 1, ["Name", "Size"], section_types)

        assert rows == [{"Name": "a", "Size": ""}]

    def test_row_with_partial_data_kept(self, section_types):
        """Test a single non-blank cell is enough to keep a row."""
        schedule = FakeSchedule("S", body=[["", "12.5mm"]])
        rows = extract_cell_data(schedule, 1, ["Name", "Size"], section_types)

        assert rows == [{"Name": "", "Size": 12.5}]

    def test_duplicate_headers_keep_last_column(self, section_types):
        """Test a repeated key holds the right-most value."""
        schedule = FakeSchedule("S", body=[["x", "y"]])
        rows = extract_cell_data(schedule, 1, ["Mark", "Mark"], section_types)

        assert rows == [{"Mark": "y"}]


class TestExtractSchedule:
    """Test whole-schedule extraction."""

    def test_door_schedule(self, door_schedule, section_types):
        """Test headers, row filtering and value parsing together."""
        table = extract_schedule(door_schedule, section_types)

        assert table.name == "Privada_Door"
        assert table.headers == ["Privada_Door", "Width", "Height"]
        assert table.total_rows == 4
        assert table.row_count == 3
        assert table.rows[1] == {"Privada_Door": "D1", "Width": 900, "Height": 2100}
        assert table.rows[2]["Width"] == 850.5

    def test_table_data_error_yields_empty(self, section_types):
        """Test a schedule whose table data throws contributes no rows."""
        schedule = FakeSchedule("Broken", body=[["a"]], table_data_error=True)
        table = extract_schedule(schedule, section_types)

        assert table.is_empty
        assert table.headers == []

    def test_no_body_rows(self, section_types):
        """Test an empty body returns an empty table."""
        schedule = FakeSchedule("Empty", body=[], column_count=3)
        table = extract_schedule(schedule, section_types)

        assert table.is_empty
        assert table.total_rows == 0

    def test_failure_mid_body_keeps_rows_read(self, section_types, caplog):
        """Test rows read before an unexpected failure are returned."""

        class NonTextCellSchedule(FakeSchedule):
            def GetCellText(self, section_type, row, col):
                if section_type == FakeSectionType.Body and row == 2:
                    return object()
                return super().GetCellText(section_type, row, col)

        schedule = NonTextCellSchedule(
            "Partial", field_names=["Name", "Qty"], body=[["a", "1"], ["b", "2"], ["c", "3"]]
        )
        with caplog.at_level("INFO", logger="scheduleporter"):
            table = extract_schedule(schedule, section_types)

        assert table.rows == [{"Name": "a", "Qty": 1}, {"Name": "b", "Qty": 2}]
        assert table.total_rows == 3
        assert any(
            record.raw_message.startswith("  -> ERROR extracting data from schedule 'Partial'")
            for record in caplog.records
        )

    def test_extract_cell_data_appends_to_given_list(self, section_types):
        schedule = FakeSchedule("S", body=[["a"]])
        rows = [{"Name": "existing"}]

        result = extract_cell_data(schedule, 1, ["Name"], section_types, rows=rows)

        assert result is rows
        assert rows == [{"Name": "existing"}, {"Name": "a"}]

    def test_missing_body_section(self, section_types):
        """Test a schedule without a body section returns an empty table."""
        schedule = FakeSchedule("NoBody", body=[["a"]])
        schedule.sections[FakeSectionType.Body] = None

        table = extract_schedule(schedule, section_types)

        assert table.is_empty

    def test_trace_messages_logged(self, door_schedule, section_types, caplog):
        """Test row-level trace lines are emitted at INFO."""
        with caplog.at_level("INFO", logger="scheduleporter"):
            extract_schedule(door_schedule, section_types)

        messages = [record.raw_message for record in caplog.records]
        assert "  -> Schedule 'Privada_Door' has 4 rows and 3 columns" in messages
        assert "    Row 2: ['', '', ''] - HasData: False" in messages
        assert "  -> Extracted 3 data rows from 'Privada_Door'" in messages
