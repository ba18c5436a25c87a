"""HTTP API for the payslip service."""
