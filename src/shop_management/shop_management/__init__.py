"""Shop Management package.

This package is organized by feature modules (employees, attendance, payroll,
notifications) with a thin Flask controller layer and service/repository layers.
"""
