from __future__ import annotations

import csv
import io
from typing import Mapping, Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.request_utils import json_object_body
from ..core.enums import PaymentMethod
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .formatter import format_sms_summary
from .periods import PayPeriod

_CSV_FIELDS = [
    "employeeId",
    "employeeName",
    "paymentMethod",
    "period",
    "periodEthiopian",
    "workingDays",
    "totalHours",
    "overtimeHours",
    "baseAmount",
    "overtimeAmount",
    "amount",
    "status",
]


def _period_from(args: Mapping) -> Optional[PayPeriod]:
    """``start``/``end`` query values -> PayPeriod, or None when absent.

    Raises ValueError for malformed dates or an inverted range.
    """
    start, end = args.get("start"), args.get("end")
    if not start and not end:
        return None
    if not start or not end:
        raise ValueError("start and end must be given together")
    return PayPeriod(start=parse_iso_date(start), end=parse_iso_date(end))


def _method_from(args: Mapping) -> Optional[PaymentMethod]:
    value = args.get("method")
    return PaymentMethod(value) if value else None


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    def _bad_request(message: str):
        return jsonify({"success": False, "message": message}), 400

    @app.route("/api/payroll", methods=["GET"], endpoint="api_payroll_overview")
    def api_payroll_overview():
        return jsonify({"success": True, **service.overview().to_dict()})

    @app.route("/api/payroll/periods", methods=["GET"], endpoint="api_payroll_periods")
    def api_payroll_periods():
        try:
            method = _method_from(request.args) or PaymentMethod.WEEKLY
        except ValueError:
            return _bad_request("method must be Weekly or Monthly")
        periods = service.period_options(method)
        return jsonify({"success": True, "method": method.value, "periods": [p.to_dict() for p in periods]})

    @app.route("/api/payroll/expenses", methods=["GET"], endpoint="api_payroll_expenses")
    def api_payroll_expenses():
        try:
            method = _method_from(request.args)
            period = _period_from(request.args) or service.default_period(method or PaymentMethod.MONTHLY)
        except ValueError as e:
            return _bad_request(str(e))
        history = service.expense_history(period, payment_method=method)
        return jsonify({"success": True, **history.to_dict()})

    @app.route("/api/payroll/export", methods=["GET"], endpoint="api_payroll_export")
    def api_payroll_export():
        try:
            method = _method_from(request.args) or PaymentMethod.WEEKLY
            period = _period_from(request.args) or service.default_period(method)
        except ValueError as e:
            return _bad_request(str(e))

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=_CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for entry in service.payroll_for_period(method, period):
            writer.writerow(entry.to_dict())

        filename = f"payroll_{method.value.lower()}_{period.start.isoformat()}_{period.end.isoformat()}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/payroll/<employee_id>", methods=["GET"], endpoint="api_payroll_employee")
    def api_payroll_employee(employee_id: str):
        try:
            period = _period_from(request.args)
            entry = service.employee_payroll(employee_id, period=period)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValueError as e:
            return _bad_request(str(e))
        if entry is None:
            return jsonify({"success": True, "entry": None, "summary": None})
        return jsonify({"success": True, "entry": entry.to_dict(), "summary": format_sms_summary(entry)})

    @app.route("/api/payroll/<employee_id>/send", methods=["POST"], endpoint="api_payroll_send")
    def api_payroll_send(employee_id: str):
        try:
            period = _period_from(json_object_body())
            result = service.send_summary(employee_id, period=period)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except (ValidationError, ValueError) as e:
            return _bad_request(str(e))
        return jsonify(result)
