"""Class Attendance package.

Feature modules (geo, schedules, attendance, reports, ...) with a thin Flask
controller layer over service/repository layers. The attendance decision
engine lives in ``attendance.service``.
"""
