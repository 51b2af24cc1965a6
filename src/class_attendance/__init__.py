"""Class Attendance package.

Organized by feature modules (attendance, school) with a thin Flask
controller layer over service/repository layers.
"""
