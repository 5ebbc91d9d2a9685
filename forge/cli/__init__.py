"""Command-line interface: root app, output helpers and error reporting."""
