"""Payslip API endpoints."""

from collections.abc import Mapping
from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, status

from payslip_service.api.dependencies import Reader, Store
from payslip_service.api.schemas import (
    ErrorResponse,
    LineItemResponse,
    PayslipCreatedResponse,
    PayslipResponse,
)
from payslip_service.calculators.validation import validate_payslip
from payslip_service.errors import PayslipValidationError
from payslip_service.services import PayslipRecord

router = APIRouter(prefix="/payslips", tags=["payslips"])


def to_response(record: PayslipRecord) -> PayslipResponse:
    """Merge a payslip header and its line items into one view."""
    data = record.payslip.to_dict()
    data.update(
        month_year_formatted=record.month_year_formatted,
        earnings=[LineItemResponse.model_validate(e) for e in record.earnings],
        deductions=[LineItemResponse.model_validate(d) for d in record.deductions],
    )
    return PayslipResponse.model_validate(data)


@router.post(
    "",
    response_model=PayslipCreatedResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_payslip(
    store: Store,
    payload: Annotated[Any, Body()],
) -> PayslipCreatedResponse:
    """Create the payslip for an employee and period, or overwrite it."""
    if not isinstance(payload, Mapping):
        raise PayslipValidationError("Request body must be a JSON object")

    submission = validate_payslip(payload)
    payslip_id = await store.submit(submission)
    return PayslipCreatedResponse(
        message="Payslip generated successfully",
        payslip_id=payslip_id,
    )


@router.get(
    "/{employee_id}/{month}/{year}",
    response_model=PayslipResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_payslip(
    reader: Reader,
    employee_id: Annotated[str, Path()],
    month: Annotated[str, Path()],
    year: Annotated[str, Path()],
) -> PayslipResponse:
    """Get a payslip by employee id, month and year."""
    record = await reader.fetch(employee_id, month, year)
    return to_response(record)
