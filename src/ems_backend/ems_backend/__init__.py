"""Employee management backend.

This package is organized by feature modules (auth, employees, records, feedback)
with a thin Flask controller layer over service and repository layers.
"""
