"""A pomodoro timer for the terminal: configuration, timer storage and a full-screen interface."""

__version__ = "0.1.0"