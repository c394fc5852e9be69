from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, jsonify, render_template, request, send_file, session

from ..common.logging_config import get_logger
from ..common.validators import require_month, require_payload, require_string
from ..container import Container
from ..core.constants import DEFAULT_TIME_IN, DEFAULT_TIME_OUT, MONTHS
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError
from ..payroll.export import to_csv_bytes, to_excel_bytes
from ..session import PayrollSession

logger = get_logger("timesheet.controller")

SESSION_KEY = "timesheet_sid"


def register(app: Flask, container: Container) -> None:
    def current_session() -> PayrollSession:
        sid = session.get(SESSION_KEY)
        if not sid:
            sid = container.sessions.new_id()
            session[SESSION_KEY] = sid
        return container.sessions.get(sid)

    def _snapshot(payroll: PayrollSession) -> dict:
        summary = payroll.summary()
        return {
            "success": True,
            "month": payroll.month,
            "basic_pay": payroll.basic_pay,
            "rows": payroll.rows(),
            "totals": asdict(summary),
            "summary": container.payroll_service.summary_ui(summary),
        }

    def _bad_request(e: ValidationError):
        logger.warning("rejected request %s %s: %s", request.method, request.path, e)
        return jsonify({"success": False, "message": str(e)}), 400

    def _filename(payroll: PayrollSession, ext: str) -> str:
        dates = payroll.dates()
        if not dates:
            return f"timesheet.{ext}"
        return f"timesheet_{dates[0].strftime('%Y%m%d')}_{dates[-1].strftime('%Y%m%d')}.{ext}"

    @app.route("/", methods=["GET"], endpoint="timesheet")
    def timesheet():
        payroll = current_session()
        data = _snapshot(payroll)
        return render_template(
            "timesheet.html",
            months=MONTHS,
            statuses=[s.value for s in DayStatus],
            default_time_in=DEFAULT_TIME_IN,
            default_time_out=DEFAULT_TIME_OUT,
            **data,
        )

    @app.route("/api/timesheet", methods=["GET"], endpoint="api_timesheet")
    def api_timesheet():
        payroll = current_session()
        data = _snapshot(payroll)
        data["entries"] = payroll.store.to_state()
        return jsonify(data)

    @app.route("/api/month", methods=["POST"], endpoint="api_month")
    def api_month():
        try:
            data = require_payload(request.get_json(silent=True))
            month = require_month(data.get("month"))
        except ValidationError as e:
            return _bad_request(e)

        payroll = current_session()
        dates = payroll.select_month(month)
        logger.debug("month=%r dates=%d", month, len(dates))
        return jsonify(_snapshot(payroll))

    @app.route("/api/basic-pay", methods=["POST"], endpoint="api_basic_pay")
    def api_basic_pay():
        try:
            data = require_payload(request.get_json(silent=True))
            raw = require_string(data, "basic_pay")
        except ValidationError as e:
            return _bad_request(e)

        payroll = current_session()
        payroll.set_basic_pay(raw)
        return jsonify(_snapshot(payroll))

    @app.route("/api/entries/<date_key>", methods=["POST"], endpoint="api_entry_field")
    def api_entry_field(date_key: str):
        payroll = current_session()
        try:
            data = require_payload(request.get_json(silent=True))
            field = require_string(data, "field")
            value = require_string(data, "value")
            updated = payroll.edit_field(date_key, field, value)
        except ValidationError as e:
            return _bad_request(e)

        result = _snapshot(payroll)
        result["updated"] = updated
        return jsonify(result)

    @app.route("/api/entries/<date_key>/status", methods=["POST"], endpoint="api_entry_status")
    def api_entry_status(date_key: str):
        payroll = current_session()
        try:
            data = require_payload(request.get_json(silent=True))
            status = require_string(data, "status")
            updated = payroll.edit_status(date_key, status)
        except ValidationError as e:
            return _bad_request(e)

        result = _snapshot(payroll)
        result["updated"] = updated
        return jsonify(result)

    @app.route("/timesheet.csv", methods=["GET"], endpoint="timesheet_csv")
    def timesheet_csv():
        payroll = current_session()
        return app.response_class(
            to_csv_bytes(payroll.rows()),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={_filename(payroll, 'csv')}"},
        )

    @app.route("/timesheet.xlsx", methods=["GET"], endpoint="timesheet_xlsx")
    def timesheet_xlsx():
        payroll = current_session()
        return send_file(
            io.BytesIO(to_excel_bytes(payroll.rows())),
            download_name=_filename(payroll, "xlsx"),
            as_attachment=True,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
