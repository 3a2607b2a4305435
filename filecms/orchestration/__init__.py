"""Orchestration: access-controlled file operations."""

from filecms.orchestration.access_controller import AccessController

__all__ = ["AccessController"]
