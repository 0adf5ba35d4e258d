from typing import Any, Dict, Iterable, List


def unique_values(rows: Iterable[Dict[str, Any]], field: str) -> List[Any]:
    """Flatten the list stored under ``field`` in every row, dropping repeats.

    Values keep the order in which they were first seen. Rows where the field
    is missing or is not a list are skipped.
    """
    seen: Dict[Any, None] = {}
    for row in rows or []:
        values = row.get(field) if isinstance(row, dict) else None
        if not isinstance(values, list):
            continue
        for value in values:
            seen.setdefault(value, None)
    return list(seen)
