"""Attendance & leave reconciliation engine.

This package is organized by feature modules (attendance, leaves, reports, ...)
with a thin Flask controller layer on top of pure service/repository layers.
"""
