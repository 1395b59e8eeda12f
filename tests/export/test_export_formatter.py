from datetime import date

from src.timetable_system.timetable_system.common.time_utils import ClockTime
from src.timetable_system.timetable_system.export.formatter import (
    generate_file_name,
    get_export_statistics,
    to_export_matrix,
)
from src.timetable_system.timetable_system.records.model import (
    AttendanceRecord,
    LeaveType,
    StaffMember,
    leave_lookup_from,
)
from src.timetable_system.timetable_system.timetable.assembler import build_grid
from src.timetable_system.timetable_system.weeks.calculator import calculate_weeks

WEEKS = calculate_weeks(date(2024, 3, 1), 2)
LEAVES = leave_lookup_from([LeaveType(leave_type_id=3, title="Annual", color="#4caf50")])
STAFF = [StaffMember(staff_id=1, name="Ann", employee_ref="E-1"), StaffMember(staff_id=2, name="Bob", employee_ref="E-2")]
RECORDS = [
    AttendanceRecord(1, "E-1", date(2024, 3, 4), ClockTime(9, 0), ClockTime(17, 0), lunch_minutes=30),
    AttendanceRecord(2, "E-2", date(2024, 3, 5), ClockTime(), ClockTime(), holiday=True),
    AttendanceRecord(3, "E-2", date(2024, 3, 6), ClockTime(), ClockTime(), leave_type_id=3),
]


def _matrix():
    groups = build_grid(RECORDS, STAFF, WEEKS, LEAVES)
    return groups, to_export_matrix(groups, group_name="North Centre", week_start_day=2)


def test_layout_rows():
    _, matrix = _matrix()
    rows = matrix.rows

    assert rows[0] == ["Time table for Centre: North Centre"]
    assert rows[1] == []
    assert rows[2][0] == "Week 1: 26/02 - 03/03"
    assert rows[3] == ["Employee", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
    assert rows[4] == ["", "26/02", "27/02", "28/02", "29/02", "01/03", "02/03", "03/03"]
    assert rows[5][0] == "Ann"
    assert rows[6][0] == "0h 00m"
    assert len(matrix.header_rows) == 2
    # 2 header rows + 5 weeks * (3 + 2 staff * 2) rows + 4 separators
    assert len(rows) == 2 + 5 * 7 + 4


def test_day_cells_match_grid_colors():
    groups, matrix = _matrix()
    rows = matrix.rows

    week2_start = 2 + 7 + 1
    ann_row = week2_start + 3
    bob_row = ann_row + 2
    assert rows[ann_row][1] == "09:00-17:00(7:30)"
    assert rows[ann_row + 1][0] == "7h 30m"
    assert rows[bob_row][2] == "Holiday"
    assert rows[bob_row][3] == "Annual"

    for row_index, staff_row in ((ann_row, groups[1].staff_rows[0]), (bob_row, groups[1].staff_rows[1])):
        for col, day in enumerate(staff_row.days, start=1):
            assert matrix.cell_styles[(row_index, col)].fill == day.color.color

    holiday_style = matrix.cell_styles[(bob_row, 2)]
    assert holiday_style.fill_argb == "FFF44336"
    assert holiday_style.bold
    assert matrix.cell_styles[(bob_row, 3)].fill == "#4caf50"


def test_merges_and_widths():
    _, matrix = _matrix()

    assert matrix.merges[0].row == 0
    assert matrix.merges[0].last_col == 7
    assert len(matrix.merges) == 1 + 5
    assert matrix.column_widths == [20] + [25] * 7


def test_file_names():
    assert generate_file_name("North Centre", WEEKS) == "Timetable_North_Centre_26-02_to_31-03.xlsx"
    assert generate_file_name("A/B", []) == "Timetable_A_B.xlsx"


def test_empty_grid_still_has_title():
    matrix = to_export_matrix([], group_name="X", week_start_day=2)
    assert matrix.rows == [["Time table for Centre: X"], []]
    assert matrix.file_name == "Timetable_X.xlsx"


def test_statistics():
    groups, _ = _matrix()
    stats = get_export_statistics(groups)

    assert stats.total_weeks == 5
    assert stats.total_staff == 2
    assert stats.total_records == 3
    assert stats.date_range == "26/02 - 31/03"
