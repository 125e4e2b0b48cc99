from .runner import ReportRunResult, RunFailure, run_report

__all__ = ["ReportRunResult", "RunFailure", "run_report"]
