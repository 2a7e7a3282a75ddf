"""Text and JSON rendering of coverage results."""

import json

from logcodes.coverage import CoverageReport
from logcodes.models import Catalog

BANNER = """\
+--------------------------------+
|       LOG CODE  COVERAGE       |
+--------------------------------+"""


def render_log_coverage(report: CoverageReport) -> str:
    lines = [BANNER]
    if report.is_complete:
        lines.append("All log codes are covered in application logs. Coverage: 100%")
    else:
        for lc in report.uncovered:
            lines.append(f"Log code not covered in application logs: {lc.human_readable_code}")
        lines.append(f"Coverage: {report.percent:.2f}%")
    return "\n".join(lines)


def render_terraform_coverage(catalog: Catalog, report: CoverageReport) -> str:
    lines = [f"Log codes from YAML: {catalog.human_readable_codes()}"]
    for lc in report.uncovered:
        lines.append(f"Log code not covered in Terraform metrics: {lc.human_readable_code}")
    return "\n".join(lines)


def report_to_dict(report: CoverageReport) -> dict:
    return {
        "total": report.total,
        "covered": report.covered,
        "uncovered": [lc.to_dict() for lc in report.uncovered],
        "coverage_percent": round(report.percent, 2),
    }


def format_report_json(report: CoverageReport) -> str:
    return json.dumps(report_to_dict(report), indent=2)
