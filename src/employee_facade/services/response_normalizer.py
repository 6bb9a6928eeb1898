"""Normalization of upstream replies into result variants.

The upstream API is inconsistent: a logical ``status`` field can disagree
with the HTTP status, by-id lookups may return zero or several records,
``data`` is sometimes missing, and create answers with a loose object rather
than an employee record. Every one of those cases is decided here, one
function per upstream operation.
"""

import logging
from typing import Any

from pydantic import ValidationError

from employee_facade.dto import SUCCESS, UpstreamCreateBody, UpstreamEnvelope
from employee_facade.entities import Employees, Failure, FailureKind
from employee_facade.protocols import UpstreamResponse

logger = logging.getLogger(__name__)

INVALID_STATUS = "Invalid response status"
UNEXPECTED_FORMAT = "Unexpected response format"
MULTIPLE_MATCHES = "More than one employee found with ID"
CREATED = "Employee created successfully"
CREATE_FAILED = "Failed to create a new employee or process the response"


def _parse_envelope(body: Any) -> UpstreamEnvelope | None:
    if not isinstance(body, dict):
        logger.warning("Upstream body is not a JSON object: %s", type(body).__name__)
        return None
    try:
        return UpstreamEnvelope.model_validate(body)
    except ValidationError as e:
        logger.warning("Upstream body does not match the employee envelope: %s", e)
        return None


def normalize_list(outcome: UpstreamResponse | Failure) -> Employees | Failure:
    """Normalize the reply to a full-list fetch.

    Args:
        outcome: What the upstream client returned

    Returns:
        Employees(200, ...) when the upstream reports success, else a Failure
    """
    if isinstance(outcome, Failure):
        return outcome

    if outcome.status_code != 200:
        return Failure(FailureKind.UPSTREAM_HTTP, outcome.status_code, UNEXPECTED_FORMAT)

    envelope = _parse_envelope(outcome.body)
    if envelope is None:
        return Failure(FailureKind.UPSTREAM_SHAPE, 500, UNEXPECTED_FORMAT)

    if not envelope.is_success:
        logger.warning("Upstream list reported logical status %r", envelope.status)
        return Failure(FailureKind.UPSTREAM_SHAPE, 500, INVALID_STATUS)

    return Employees(status_code=200, employees=envelope.employees())


def normalize_get(outcome: UpstreamResponse | Failure, employee_id: str) -> Employees | Failure:
    """Normalize the reply to a by-id lookup.

    Exactly one record is a success. Zero or several records under a 200
    reply are an integrity problem (500), not a 404: a 404 only ever comes
    from the upstream's own status.

    Args:
        outcome: What the upstream client returned
        employee_id: The id that was looked up (for messages)

    Returns:
        Employees(200, (employee,)) or a Failure
    """
    if isinstance(outcome, Failure):
        return outcome

    if outcome.status_code != 200:
        return Failure(
            FailureKind.UPSTREAM_HTTP,
            outcome.status_code,
            f"Employee not found with ID: {employee_id}",
        )

    envelope = _parse_envelope(outcome.body)
    if envelope is None:
        return Failure(FailureKind.UPSTREAM_SHAPE, 500, UNEXPECTED_FORMAT)

    employees = envelope.employees()
    if envelope.is_success and len(employees) == 1:
        return Employees(status_code=200, employees=employees)

    logger.warning(
        "Lookup of employee %s returned %d records with status %r",
        employee_id,
        len(employees),
        envelope.status,
    )
    return Failure(FailureKind.UPSTREAM_SHAPE, 500, MULTIPLE_MATCHES)


def normalize_create(outcome: UpstreamResponse | Failure) -> Employees | Failure:
    """Normalize the reply to a create call.

    The upstream answers ``{status, data: {name, salary, age, id}}``. Fields
    missing from ``data`` stay unset on the resulting employee.

    Args:
        outcome: What the upstream client returned

    Returns:
        Employees(201, (employee,), CREATED) or Failure(..., 500, CREATE_FAILED)
    """
    if isinstance(outcome, Failure):
        if outcome.kind is FailureKind.TRANSPORT:
            return outcome
        return Failure(outcome.kind, 500, CREATE_FAILED)

    if outcome.status_code != 200 or not isinstance(outcome.body, dict):
        return Failure(FailureKind.UPSTREAM_SHAPE, 500, CREATE_FAILED)

    try:
        body = UpstreamCreateBody.model_validate(outcome.body)
    except ValidationError as e:
        logger.error("Error while processing create response: %s", e)
        return Failure(FailureKind.UPSTREAM_SHAPE, 500, CREATE_FAILED)

    if body.status != SUCCESS or body.data is None:
        logger.warning("Create reported status %r with data present=%s", body.status, body.data is not None)
        return Failure(FailureKind.UPSTREAM_SHAPE, 500, CREATE_FAILED)

    employee = body.data.to_entity()
    logger.info("Successfully created a new employee with ID: %s", employee.id)
    return Employees(status_code=201, employees=(employee,), message=CREATED)


def normalize_delete(outcome: UpstreamResponse | Failure, employee_id: str) -> Employees | Failure:
    """Normalize the reply to a delete call.

    A 200 reply is passed through as-is; a missing ``data`` is an empty list.

    Args:
        outcome: What the upstream client returned
        employee_id: The id that was deleted (for messages)

    Returns:
        Employees(200, data, upstream message) or a Failure
    """
    failed = f"Failed to delete the employee with ID: {employee_id}"

    if isinstance(outcome, Failure):
        if outcome.kind is FailureKind.TRANSPORT:
            return outcome
        return Failure(FailureKind.UPSTREAM_HTTP, outcome.status_code, failed)

    if outcome.status_code != 200:
        return Failure(FailureKind.UPSTREAM_HTTP, outcome.status_code, failed)

    if outcome.body is None:
        return Employees(status_code=200)

    envelope = _parse_envelope(outcome.body)
    if envelope is None:
        return Failure(FailureKind.UPSTREAM_SHAPE, 500, UNEXPECTED_FORMAT)

    return Employees(status_code=200, employees=envelope.employees(), message=envelope.message)
