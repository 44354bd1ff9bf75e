"""Application use cases (read-side aggregates spanning several repositories)."""

from lawdesk.application.use_cases.dashboard import GetDashboardUseCase, build_dashboard

__all__ = ["GetDashboardUseCase", "build_dashboard"]
