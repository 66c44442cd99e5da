"""SQL Fragment Builder — sparse update / filter mappings → parameterized SQL.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no module state
    - Placeholder $n in a fragment always refers to values[n - 1]
    - Placeholder numbers are taken when a clause is appended, never reserved
    - Values are never interpolated into SQL text; binding is the driver's job
    - Either a complete (fragment, values) pair is returned or an error is raised

Design Decisions:
    - Positional $n placeholders: asyncpg's native paramstyle, bound as-is
    - Filter vocabulary is a fixed tuple; unknown criteria keys are ignored here
      because the companySearch schema rejects them upstream
"""

import math
from typing import Any, Mapping, NamedTuple

from jobly.core.domain_types import INT4_MAX, INT4_MIN, NameTranslation
from jobly.core.errors import EmptyInputError, NotANumberError, RangeError
from jobly.core.numeric import parse_number

NAME_LIKE = "nameLike"
MIN_EMPLOYEES = "minEmployees"
MAX_EMPLOYEES = "maxEmployees"

FILTER_KEYS = (NAME_LIKE, MIN_EMPLOYEES, MAX_EMPLOYEES)


class UpdateFragment(NamedTuple):
    """SET-list fragment plus its bound values."""
    set_cols: str
    values: list[Any]


class FilterFragment(NamedTuple):
    """WHERE-clause body plus its bound values. Empty clause means no filter."""
    where_clause: str
    values: list[Any]


def build_update_fragment(
    field_map: Mapping[str, Any], name_translation: NameTranslation,
) -> UpdateFragment:
    """Build a SET list for a partial update.

    Keys missing from ``name_translation`` are used as column names verbatim.

        >>> build_update_fragment({"test": 5, "test2": 6}, {"test": "test_column"})
        UpdateFragment(set_cols='"test_column"=$1, "test2"=$2', values=[5, 6])
    """
    if not field_map:
        raise EmptyInputError()

    cols = [
        f'"{name_translation.get(key) or key}"=${idx}'
        for idx, key in enumerate(field_map, start=1)
    ]
    return UpdateFragment(", ".join(cols), list(field_map.values()))


def _check_employee_range(criteria: Mapping[str, Any]) -> None:
    """Raise RangeError when both bounds parse and min > max.

    A bound that does not parse skips this check; the per-field parse
    raises NotANumberError for it instead.
    """
    if MIN_EMPLOYEES not in criteria or MAX_EMPLOYEES not in criteria:
        return
    low = parse_number(criteria[MIN_EMPLOYEES])
    high = parse_number(criteria[MAX_EMPLOYEES])
    if low.ok and high.ok and low.value > high.value:
        raise RangeError()


def _require_number(criteria: Mapping[str, Any], key: str) -> int | float:
    parsed = parse_number(criteria[key])
    if not parsed.ok:
        raise NotANumberError(key, parsed.reason)
    return parsed.value


def _int4(number: int) -> int:
    return min(max(number, INT4_MIN), INT4_MAX)


def build_filter_fragment(criteria: Mapping[str, Any]) -> FilterFragment:
    """Build a WHERE body from company search criteria.

    Clauses always come out in the order nameLike, minEmployees, maxEmployees.

    Bounds are compared with the int4 column num_employees, and asyncpg will
    not encode a float or an out-of-range int for an int4 parameter. So a
    fractional minEmployees rounds up, a fractional maxEmployees rounds down,
    and both are clamped to the int4 range.
    """
    if not criteria:
        raise EmptyInputError()

    _check_employee_range(criteria)

    clauses: list[str] = []
    values: list[Any] = []

    if NAME_LIKE in criteria:
        values.append(f"%{criteria[NAME_LIKE]}%")
        clauses.append(f"name ILIKE ${len(values)}")

    if MIN_EMPLOYEES in criteria:
        values.append(_int4(math.ceil(_require_number(criteria, MIN_EMPLOYEES))))
        clauses.append(f"num_employees >= ${len(values)}")

    if MAX_EMPLOYEES in criteria:
        values.append(_int4(math.floor(_require_number(criteria, MAX_EMPLOYEES))))
        clauses.append(f"num_employees <= ${len(values)}")

    return FilterFragment(" AND ".join(clauses), values)
