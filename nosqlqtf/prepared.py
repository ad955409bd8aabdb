"""Prepared query statements and their bind variables."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass
class PreparedStatement:
    """A query prepared by the server, reusable with different bind variables.

    ``driver_query_plan`` is None for simple queries; otherwise it is the
    plan executed at the client and must provide ``reset()``.
    """

    sql_text: str = ""
    query_plan: str = ""
    query_schema: str = ""
    table_name: str | None = None
    namespace: str | None = None
    operation: int = 0
    driver_query_plan: Any = None
    topology_info: Any = None
    statement: bytes = b""
    variable_to_ids: dict[str, int] | None = None
    num_registers: int = 0
    num_iterators: int = 0
    bind_variables: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"PreparedStatement: size={len(self.statement)}, data={self.bind_variables!r}"

    def __copy__(self) -> PreparedStatement:
        # Copies never carry the bound variables over.
        return replace(self, bind_variables={})

    def is_simple(self) -> bool:
        """True if the query needs no plan executed at the client."""
        return self.driver_query_plan is None

    def is_empty(self) -> bool:
        """True if no serialized statement is held."""
        return len(self.statement) == 0

    def reset(self) -> None:
        """Return the client plan to its initial state; bound variables are kept."""
        if self.driver_query_plan is not None:
            self.driver_query_plan.reset()

    def copy_for_internal(self) -> PreparedStatement:
        """Return a copy holding only the serialized statement and the bound variables."""
        return PreparedStatement(
            statement=bytes(self.statement),
            bind_variables={k: copy.deepcopy(v) for k, v in self.bind_variables.items()},
        )

    def set_variable(self, name: str, value: Any) -> None:
        """Bind a named variable."""
        self.bind_variables[name] = copy.deepcopy(value)

    def set_variable_by_id(self, id: int, value: Any) -> None:
        """Bind a positional variable."""
        self.bind_variables[f"#{id}"] = copy.deepcopy(value)

    def get_variable_by_id(self, id: int) -> Any:
        """Return the value bound to the variable with the given id, or None."""
        if self.variable_to_ids is None:
            return None
        for name, var_id in self.variable_to_ids.items():
            if var_id == id:
                return self.bind_variables.get(name)
        return None