from __future__ import annotations

import csv
import io

from flask import Flask

from ..common.http import api_errors, ok
from ..container import Container

SLIP_FIELDS = [
    "mentor",
    "period",
    "billable_minutes",
    "lectures",
    "average_rating",
    "m_rate",
    "m_freq",
    "units",
    "lecture_pay",
    "other_pay",
    "total_pay",
]


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @api_errors("build the dashboard")
    def dashboard():
        summary = container.payment_report_service.build_dashboard()
        return ok(dashboard=summary.as_dict())

    @app.route("/api/mentors/<int:mentor_id>/payments", methods=["GET"], endpoint="mentor_payments")
    @api_errors("calculate payments")
    def mentor_payments(mentor_id: int):
        summary = container.payment_report_service.summarize_mentor(mentor_id)
        return ok(summary=summary.as_dict())

    @app.route("/api/mentors/<int:mentor_id>/payment-slip.csv", methods=["GET"], endpoint="payment_slip_csv")
    @api_errors("export the payment slip")
    def payment_slip_csv(mentor_id: int):
        """Printable payment slip: weekly rows plus window and all-time totals."""

        rows = container.payment_report_service.payment_slip_rows(mentor_id)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=SLIP_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=payment_slip_{mentor_id}.csv"},
        )
