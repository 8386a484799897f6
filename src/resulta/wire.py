"""Plain-record form of a Result for serialization boundaries.

A Result crosses process or stream boundaries as
``{"status": 1 | 2, "value": ..., "err": ...}``. Nothing here depends on
class identity: any dict of that shape decodes back to an equal Result.
Payloads are passed through untouched; making them JSON-safe is the
caller's concern.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)

from resulta._flags import strict_wire_enabled
from resulta.core import Result, ResultStatus, err, ok
from resulta.errors import ResultShapeError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class ResultRecord(BaseModel):
    """Validated wire shape of a Result."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: ResultStatus
    value: Any = None
    err: Any = None

    @field_validator("status", mode="before")
    @classmethod
    def reject_bool_status(cls, status: Any) -> Any:
        if isinstance(status, bool):
            raise ValueError("status must be 1 or 2, not a bool")
        return status

    @model_validator(mode="after")
    def check_inactive_slot(self, info: ValidationInfo) -> ResultRecord:
        strict = True if info.context is None else info.context.get("strict", True)
        if not strict:
            return self
        if self.status is ResultStatus.OK and self.err is not None:
            raise ValueError("Ok record must have err=None")
        if self.status is ResultStatus.ERR and self.value is not None:
            raise ValueError("Err record must have value=None")
        return self

    @field_serializer("status")
    def serialize_status(self, status: ResultStatus) -> int:
        return int(status)

    @classmethod
    def from_result(cls, res: Result[Any, Any]) -> ResultRecord:
        return cls.model_construct(status=res.status, value=res.value, err=res.err)

    def to_result(self) -> Result[Any, Any]:
        """Rebuild the Result, reading only the slot the status selects."""
        if self.status is ResultStatus.OK:
            return ok(self.value)
        return err(self.err)


def to_dict(res: Result[Any, Any]) -> dict[str, Any]:
    """Return *res* as a plain ``status``/``value``/``err`` dict.

    Payload slots hold the same objects as *res*; nothing is serialized.
    """
    return {"status": int(res.status), "value": res.value, "err": res.err}


def from_dict(data: Mapping[str, Any], *, strict: bool | None = None) -> Result[Any, Any]:
    """Rebuild a Result from its plain-record form.

    Args:
        data: Mapping with a ``status`` of ``1`` (Ok) or ``2`` (Err) and the
            matching payload key. Missing payload keys default to ``None``.
        strict: Reject records whose inactive slot is populated. Defaults to
            the ``RESULTA_STRICT_WIRE`` toggle (on unless set to ``"0"``).

    Raises:
        ResultShapeError: The record does not describe a single variant.
    """
    strict = strict_wire_enabled(override=strict)
    try:
        record = ResultRecord.model_validate(data, context={"strict": strict})
    except ValidationError as e:
        logger.debug("Rejected result record (strict=%s): %s", strict, e)
        raise ResultShapeError(
            "Malformed result record",
            hint="Expected {'status': 1, 'value': ...} or {'status': 2, 'err': ...}.",
        ) from e
    return record.to_result()
