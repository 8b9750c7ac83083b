"""Reporters for declared methods."""

from sigparams.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = ["ConsoleConfig", "ConsoleReporter"]
