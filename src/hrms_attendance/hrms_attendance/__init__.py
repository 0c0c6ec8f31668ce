"""HRMS Attendance package.

Feature modules (employees, attendance, dashboard) sit on top of a thin REST
adapter and a Flask controller layer. The daily aggregation logic lives in
``attendance.aggregator`` and has no I/O.
"""
