"""In-memory ordered employee directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from employee_directory.models.employee import Employee, new_employee_id

logger = logging.getLogger(__name__)


class OutOfRangeError(IndexError):
    def __init__(self, index: int, size: int, *, inclusive: bool = False) -> None:
        upper = f"{size}]" if inclusive else f"{size})"
        super().__init__(f"Index {index} out of range [0, {upper}")
        self.index = index
        self.size = size


def _check_positions(positions: Iterable[int], size: int) -> set[int]:
    checked = set(positions)
    for index in sorted(checked):
        if index < 0 or index >= size:
            raise OutOfRangeError(index, size)
    return checked


def _matches(employee: Employee, needle: str) -> bool:
    return (
        needle in employee.name.casefold()
        or needle in employee.email.casefold()
        or needle in employee.department.casefold()
    )


class Directory:
    """Ordered collection of employees with unique ids.

    Positions passed to ``remove_at`` and ``move`` index the full list. Use
    ``resolve_view_positions`` / ``resolve_view_destination`` to translate
    positions taken from a ``search`` result first.
    """

    def __init__(self, seed: Iterable[Employee] = ()) -> None:
        self._records: list[Employee] = []
        for employee in seed:
            self.append(employee)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Employee]:
        return iter(tuple(self._records))

    @property
    def records(self) -> tuple[Employee, ...]:
        return tuple(self._records)

    def get(self, employee_id: str) -> Employee | None:
        for employee in self._records:
            if employee.id == employee_id:
                return employee
        return None

    def index_of(self, employee_id: str) -> int | None:
        for index, employee in enumerate(self._records):
            if employee.id == employee_id:
                return index
        return None

    def search(self, query: str) -> list[Employee]:
        if not query:
            return list(self._records)
        needle = query.casefold()
        return [e for e in self._records if _matches(e, needle)]

    def append(self, employee: Employee) -> Employee:
        if any(e.id == employee.id for e in self._records):
            fresh = employee.model_copy(update={"id": new_employee_id()})
            logger.warning("Duplicate employee id %s re-assigned to %s", employee.id, fresh.id)
            employee = fresh
        self._records.append(employee)
        return employee

    def remove_at(self, positions: Iterable[int]) -> list[Employee]:
        doomed = _check_positions(positions, len(self._records))
        removed = [e for i, e in enumerate(self._records) if i in doomed]
        self._records = [e for i, e in enumerate(self._records) if i not in doomed]
        return removed

    def move(self, from_positions: Iterable[int], to_position: int) -> None:
        size = len(self._records)
        sources = _check_positions(from_positions, size)
        if to_position < 0 or to_position > size:
            raise OutOfRangeError(to_position, size, inclusive=True)
        if not sources:
            return

        # The block lands before whatever sat at to_position prior to the move.
        moved = [e for i, e in enumerate(self._records) if i in sources]
        before = [e for i, e in enumerate(self._records[:to_position]) if i not in sources]
        after = [e for i, e in enumerate(self._records) if i >= to_position and i not in sources]
        self._records = before + moved + after

    def resolve_view_positions(self, query: str, positions: Iterable[int]) -> list[int]:
        if not query:
            return sorted(_check_positions(positions, len(self._records)))
        view = self.search(query)
        checked = _check_positions(positions, len(view))
        return sorted(self._full_index(view[i]) for i in checked)

    def resolve_view_destination(self, query: str, position: int) -> int:
        view = self.search(query) if query else self._records
        if position < 0 or position > len(view):
            raise OutOfRangeError(position, len(view), inclusive=True)
        if not query:
            return position
        if position < len(view):
            return self._full_index(view[position])
        if not view:
            return len(self._records)
        return self._full_index(view[-1]) + 1

    def _full_index(self, employee: Employee) -> int:
        index = self.index_of(employee.id)
        assert index is not None
        return index
