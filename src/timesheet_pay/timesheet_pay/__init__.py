"""Timesheet Pay package.

Organized by feature modules (calendar, attendance, payroll) with a thin Flask
controller layer over plain service/strategy layers. All state is transient
and lives in the user's session.
"""
