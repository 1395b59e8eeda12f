"""Timetable System package.

Feature modules (weeks, shifts, days, colors, timetable, export, reporting)
turn raw attendance/leave/holiday records into a weekly staff grid. A thin
Flask controller layer sits on top of the service/repository layers.
"""
