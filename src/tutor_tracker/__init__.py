"""Tutor Tracker package.

Weekly class schedules and daily attendance for a private tutor, organized
by feature modules (students, schedules, attendance, auth, ...) with a thin
Flask controller layer over service/repository layers.
"""
