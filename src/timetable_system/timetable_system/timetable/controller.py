from __future__ import annotations

import io
import logging
from dataclasses import asdict

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import today_local
from ..common.validators import parse_flag, parse_month, parse_optional_int, require_non_empty
from ..core.exceptions import DomainError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    service = container.timetable_service

    def _query():
        group_id = require_non_empty(request.args.get("group_id"), "group_id")
        month_ref = parse_month(request.args.get("month"), default=today_local())
        week_start_day = parse_optional_int(request.args.get("week_start_day"), "week_start_day")
        return group_id, month_ref, week_start_day

    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        status = 400 if isinstance(e, ValidationError) else 422
        return jsonify({"success": False, "message": str(e)}), status

    @app.route("/timetable", methods=["GET"], endpoint="timetable")
    def timetable():
        group_id, month_ref, week_start_day = _query()
        view = service.build_month(
            month_ref=month_ref,
            group_id=group_id,
            week_start_day=week_start_day,
            include_marker_only_days=parse_flag(request.args.get("include_markers")),
        )
        return jsonify({"success": True, "data": service.to_ui(view)})

    @app.route("/timetable/weeks", methods=["GET"], endpoint="timetable_weeks")
    def timetable_weeks():
        month_ref = parse_month(request.args.get("month"), default=today_local())
        week_start_day = parse_optional_int(request.args.get("week_start_day"), "week_start_day")
        weeks = service.get_weeks(month_ref, week_start_day=week_start_day)
        return jsonify(
            {
                "success": True,
                "data": [
                    {
                        "week_num": w.week_num,
                        "label": w.label,
                        "start": w.week_start.strftime("%Y-%m-%d"),
                        "end": w.week_end.strftime("%Y-%m-%d"),
                    }
                    for w in weeks
                ],
            }
        )

    @app.route("/timetable/export", methods=["GET"], endpoint="timetable_export")
    def timetable_export():
        group_id, month_ref, week_start_day = _query()
        export = service.export_month(month_ref=month_ref, group_id=group_id, week_start_day=week_start_day)
        logger.info("Sending %s (%s bytes)", export.file_name, len(export.content))
        return send_file(
            io.BytesIO(export.content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=export.file_name,
        )

    @app.route("/timetable/report", methods=["GET"], endpoint="timetable_report")
    def timetable_report():
        group_id, month_ref, week_start_day = _query()
        report = service.report_month(month_ref=month_ref, group_id=group_id, week_start_day=week_start_day)
        data = asdict(report)
        data["generated_at"] = report.generated_at.isoformat()
        return jsonify({"success": True, "data": data})

    @app.route("/timetable/validation", methods=["GET"], endpoint="timetable_validation")
    def timetable_validation():
        group_id, month_ref, week_start_day = _query()
        result = service.validate_month(month_ref=month_ref, group_id=group_id, week_start_day=week_start_day)
        return jsonify(
            {
                "success": True,
                "data": {
                    "total": result.report.total,
                    "valid": result.report.valid,
                    "invalid": result.report.invalid,
                    "issues": [
                        {"record_id": i.record_id, "severity": i.severity.value, "message": i.message}
                        for i in result.report.issues
                    ],
                    "holiday_leave_conflicts": [
                        {
                            "record_id": c.record_id,
                            "staff_ref": c.staff_ref,
                            "date": c.work_date.strftime("%Y-%m-%d"),
                            "leave_type_id": c.leave_type_id,
                        }
                        for c in result.conflicts
                    ],
                },
            }
        )
