"""Clinic Attendance package.

Feature modules (staff, attendance, auth, portal) with a thin Flask controller
layer over service/repository layers. The repositories are in-memory.
"""
