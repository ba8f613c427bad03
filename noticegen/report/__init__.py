"""Markdown notices report."""

from noticegen.report.markdown import render, write_report

__all__ = ["render", "write_report"]
