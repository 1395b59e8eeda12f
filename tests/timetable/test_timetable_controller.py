from datetime import date
from types import SimpleNamespace

from flask import Flask

from src.timetable_system.timetable_system.common.time_utils import ClockTime
from src.timetable_system.timetable_system.core.settings import TimetableSettings
from src.timetable_system.timetable_system.records.model import AttendanceRecord, LeaveType, StaffMember
from src.timetable_system.timetable_system.timetable.controller import register
from src.timetable_system.timetable_system.timetable.service import TimetableService


class _Records:
    def __init__(self):
        self.periods = []

    def list_for_period(self, *, group_id, start_date, end_date):
        self.periods.append((start_date, end_date))
        return [AttendanceRecord(1, "E-1", date(2024, 3, 4), ClockTime(9, 0), ClockTime(17, 0), lunch_minutes=30)]


class _Staff:
    def list_for_group(self, group_id):
        return [StaffMember(1, "Ann", "E-1")]

    def get_group_name(self, group_id):
        return None


class _LeaveTypes:
    def list_all(self):
        return [LeaveType(3, "Annual", "#4caf50")]


class _Holidays:
    def list_dates(self, *, group_id, start_date, end_date):
        return []


def _client(records=None):
    app = Flask(__name__)
    service = TimetableService(
        records or _Records(), _Staff(), _LeaveTypes(), _Holidays(), settings=TimetableSettings(week_start_day=2)
    )
    register(app, SimpleNamespace(timetable_service=service))
    return app.test_client()


def test_timetable_json():
    resp = _client().get("/timetable?group_id=9&month=2024-03")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["group_name"] == "9"
    assert body["data"]["weeks"][1]["staff"][0]["days"][0]["content"] == "09:00-17:00(7:30)"


def test_missing_group_is_a_bad_request():
    resp = _client().get("/timetable?month=2024-03")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_bad_month_is_a_bad_request():
    resp = _client().get("/timetable?group_id=9&month=March")
    assert resp.status_code == 400


def test_weeks_endpoint():
    resp = _client().get("/timetable/weeks?month=2024-03-10&week_start_day=2")

    weeks = resp.get_json()["data"]
    assert weeks[0]["start"] == "2024-02-26"
    assert len(weeks) == 5


def test_export_download():
    resp = _client().get("/timetable/export?group_id=9&month=2024-03")

    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert "Timetable_9_26-02_to_31-03.xlsx" in resp.headers["Content-Disposition"]


def test_report_and_validation_endpoints():
    client = _client()

    report = client.get("/timetable/report?group_id=9&month=2024-03").get_json()["data"]
    assert report["summary"]["total_staff"] == 1

    validation = client.get("/timetable/validation?group_id=9&month=2024-03").get_json()["data"]
    assert validation["total"] == 1
    assert validation["invalid"] == 0


def test_validation_window_follows_requested_week_start_day():
    records = _Records()
    client = _client(records)

    client.get("/timetable?group_id=9&month=2024-03&week_start_day=1")
    client.get("/timetable/validation?group_id=9&month=2024-03&week_start_day=1")

    assert records.periods == [(date(2024, 2, 25), date(2024, 4, 6))] * 2
