"""site_mapper.report: Отчёты по карте сайта (текст, JSON, HTML)."""

from site_mapper.report.html_report import render_html
from site_mapper.report.json_report import render_json, report_to_dict
from site_mapper.report.text_report import PRINT_MODES, render_flat, render_flattest, render_text

__all__ = [
    "render_html",
    "render_json",
    "report_to_dict",
    "PRINT_MODES",
    "render_flat",
    "render_flattest",
    "render_text",
]
