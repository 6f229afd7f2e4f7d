# src/quicktasks/__init__.py

"""QuickTasks: a single-screen console to-do list."""

__version__ = "0.1.0"
