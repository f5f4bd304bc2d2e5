"""Flow handlers."""

from .employee_form_handler import EmployeeFormHandler

__all__ = ["EmployeeFormHandler"]
