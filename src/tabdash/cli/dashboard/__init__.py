"""Interactive dashboard application."""

from tabdash.cli.dashboard.app import DashboardApp, compose, render_frame, run_dashboard

__all__ = ["DashboardApp", "compose", "render_frame", "run_dashboard"]
