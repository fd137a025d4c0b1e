"""Column metadata models tracked by a recipe.

A ``VariableInfo`` is keyed by ``(variable, type)``: a step that turns a
numeric column into a nominal one under the same name produces a second row
rather than overwriting the first. A role of ``None`` means unset; the empty
string is the explicit "no role" tag given at construction.
"""

from collections import Counter
from typing import Iterable, Optional

import pyarrow as pa
from pydantic import BaseModel, Field, model_validator

ORIGINAL = "original"
DERIVED = "derived"


class Variable(BaseModel):
    """Metadata for a single column."""

    variable: str = Field(description="Column name")
    type: Optional[str] = Field(
        default=None, description="Structural type (e.g. 'numeric', 'nominal')"
    )
    role: Optional[str] = Field(
        default=None, description="Free-form role tag; None when unset"
    )
    source: Optional[str] = Field(
        default=None, description="'original' or 'derived'; None when unset"
    )

    @property
    def key(self) -> tuple[str, Optional[str]]:
        return (self.variable, self.type)


class VariableInfo(BaseModel):
    """Ordered column metadata table, unique by (variable, type).

    Rows are only ever appended. When a step changes a column's type, the
    earlier row stays as history next to the new one, so a name can appear
    more than once; the last row for a name describes its current type.
    Role lookups such as ``with_roles`` match history rows too.
    """

    variables: list[Variable] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_keys(self) -> "VariableInfo":
        seen = set()
        for var in self.variables:
            if var.key in seen:
                raise ValueError(
                    f"Duplicate variable entry: {var.variable} ({var.type})"
                )
            seen.add(var.key)
        return self

    @classmethod
    def from_types(
        cls,
        types: dict[str, str],
        roles: dict[str, str] | None = None,
        source: str | None = ORIGINAL,
    ) -> "VariableInfo":
        """Build a table from a name -> type mapping, merging roles by name."""
        roles = roles or {}
        return cls(
            variables=[
                Variable(
                    variable=name,
                    type=type_,
                    role=roles.get(name, ""),
                    source=source,
                )
                for name, type_ in types.items()
            ]
        )

    def __len__(self) -> int:
        return len(self.variables)

    def names(self) -> list[str]:
        """Return variable names in table order, without repeats."""
        return list(dict.fromkeys(var.variable for var in self.variables))

    def get(self, name: str, type_: str | None = None) -> Optional[Variable]:
        """Return the last row for name, optionally restricted to a type."""
        found = None
        for var in self.variables:
            if var.variable == name and (type_ is None or var.type == type_):
                found = var
        return found

    def roles(self) -> list[Optional[str]]:
        return [var.role for var in self.variables]

    def copy_table(self) -> "VariableInfo":
        """Return an independent deep copy."""
        return self.model_copy(deep=True)

    def merge_types(self, types: dict[str, str]) -> "VariableInfo":
        """Merge observed column types into the table, keyed by (variable, type).

        Existing rows keep their role and source. Pairs not yet present are
        appended, in the order given, with role and source unset.
        """
        merged = self.copy_table()
        known = {var.key for var in merged.variables}
        for name, type_ in types.items():
            if (name, type_) not in known:
                merged.variables.append(Variable(variable=name, type=type_))
                known.add((name, type_))
        return merged

    def fill_roles(self, role: str | None) -> "VariableInfo":
        """Assign role to every row whose role is unset."""
        if role is None:
            return self.copy_table()
        return self._fill("role", role)

    def fill_sources(self, source: str) -> "VariableInfo":
        """Assign source to every row whose source is unset."""
        return self._fill("source", source)

    def _fill(self, field: str, value: str) -> "VariableInfo":
        filled = self.copy_table()
        for var in filled.variables:
            if getattr(var, field) is None:
                setattr(var, field, value)
        return filled

    def with_roles(self, roles: Iterable[str]) -> "VariableInfo":
        """Return the rows whose role is one of roles, history rows included."""
        wanted = set(roles)
        return VariableInfo(
            variables=[
                var.model_copy() for var in self.variables if var.role in wanted
            ]
        )

    def role_counts(self) -> dict[str, int]:
        """Count rows per role, sorted by role; unset roles count as ''."""
        counts = Counter(var.role or "" for var in self.variables)
        return dict(sorted(counts.items()))

    def to_arrow(self) -> pa.Table:
        """Return the table as a pyarrow Table with one column per field."""
        return pa.table(
            {
                "variable": pa.array([v.variable for v in self.variables], pa.string()),
                "type": pa.array([v.type for v in self.variables], pa.string()),
                "role": pa.array([v.role for v in self.variables], pa.string()),
                "source": pa.array([v.source for v in self.variables], pa.string()),
            }
        )
