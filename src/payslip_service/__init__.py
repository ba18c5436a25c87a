"""Payslip service: submit and retrieve monthly employee payslips."""

__version__ = "0.1.0"
