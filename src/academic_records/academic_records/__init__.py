"""Academic Records package.

This package is organized by feature modules (students, classes, grades,
attendance, ...) with in-memory record stores, pure analytics/query layers
and a thin Flask controller layer.
"""
