"""Payroll Desk package.

Organized by feature modules (employees, payroll) with a thin Flask
controller layer over service and repository layers.
"""
