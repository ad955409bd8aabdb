"""Requests that insert a single row into a table, and their results."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

_SECONDS_PER_HOUR = 3600
_HOURS_PER_DAY = 24


class OpCode(enum.Enum):
    """The kind of put operation a request performs."""

    PUT = "Put"
    PUT_IF_ABSENT = "PutIfAbsent"
    PUT_IF_PRESENT = "PutIfPresent"
    PUT_IF_VERSION = "PutIfVersion"


@dataclass
class PutResult:
    """The outcome of a put operation.

    ``version`` is set when the put succeeded. The ``existing_*`` fields are
    only filled when the previous row was requested and one existed;
    ``existing_modification_time`` is in milliseconds since the epoch.
    """

    version: bytes | None = None
    consumed: Any = None
    generated_value: Any = None
    existing_modification_time: int = 0
    existing_value: dict[str, Any] | None = None
    existing_version: bytes | None = None


class PutRequest:
    """Insert one row into a table, optionally conditional on its current state.

    The default is an unconditional put that overwrites any existing row.
    Builder methods return the request itself so calls can be chained.
    """

    def __init__(self, table_name: str) -> None:
        self.table_name = table_name
        self.compartment = ""
        self.row: dict[str, Any] = {}
        self.request_timeout: timedelta | None = None
        self.abort_on_fail = False
        self.wants_return_row = False
        self.present_required = False
        self.absent_required = False
        self.time_to_live = timedelta(0)
        self.uses_table_ttl = False
        self.exact_match = False
        self.match_version = b""

    def __repr__(self) -> str:
        return (
            f"PutRequest(table_name={self.table_name!r}, op_code={self.op_code().value}, "
            f"row={self.row!r})"
        )

    def value(self, val: Mapping[str, Any]) -> PutRequest:
        """Set the row to write, as a mapping of column name to value."""
        if not isinstance(val, Mapping):
            raise TypeError(
                f"could not convert {type(val).__name__} to a row value: a mapping is required"
            )
        self.row = dict(val)
        return self

    def timeout(self, t: timedelta) -> PutRequest:
        """Set the timeout for this request."""
        self.request_timeout = t
        return self

    def compartment_id(self, compartment_id: str) -> PutRequest:
        """Set the compartment name or id used for this operation (cloud only)."""
        self.compartment = compartment_id
        return self

    def return_row(self, val: bool) -> PutRequest:
        """Ask for information about the existing row to be returned."""
        self.wants_return_row = val
        return self

    def ttl(self, val: timedelta) -> PutRequest:
        """Set the time to live of the row; it is rounded to whole hours, at least one."""
        self.time_to_live = val
        return self

    def use_table_ttl(self, val: bool) -> PutRequest:
        """Update the row's time to live from the table default on an overwrite."""
        self.uses_table_ttl = val
        return self

    def if_version(self, version: bytes) -> PutRequest:
        """Succeed only if the row exists and its version matches ``version``."""
        self.match_version = bytes(version)
        self.present_required = False
        self.absent_required = False
        return self

    def if_absent(self) -> PutRequest:
        """Succeed only if the row does not already exist."""
        self.absent_required = True
        self.present_required = False
        self.match_version = b""
        return self

    def if_present(self) -> PutRequest:
        """Succeed only if the row already exists."""
        self.present_required = True
        self.absent_required = False
        self.match_version = b""
        return self

    def op_code(self) -> OpCode:
        """Return the operation implied by the conditions set on the request."""
        if self.match_version:
            return OpCode.PUT_IF_VERSION
        if self.present_required:
            return OpCode.PUT_IF_PRESENT
        if self.absent_required:
            return OpCode.PUT_IF_ABSENT
        return OpCode.PUT

    def ttl_spec(self) -> str | None:
        """Return the time-to-live setting sent with the request, or None if none is sent.

        The value is a whole number of hours (at least one), expressed in days
        when it divides evenly into days. No value is sent when the table's
        default time to live is used.
        """
        if self.uses_table_ttl:
            return None
        seconds = int(self.time_to_live.total_seconds())
        if seconds <= 0:
            return None
        hours = max(seconds // _SECONDS_PER_HOUR, 1)
        if hours % _HOURS_PER_DAY == 0:
            return f"{hours // _HOURS_PER_DAY} DAYS"
        return f"{hours} HOURS"