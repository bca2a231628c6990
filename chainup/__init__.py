"""Core pieces of a toolchain manager: settings, errors, notifications, environment, terminal and disk IO."""

__version__ = "0.1.0"