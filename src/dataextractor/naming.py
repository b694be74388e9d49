"""
Column naming conventions.

Two conventions identify the group a column belongs to: the legacy
``var@Group`` form and the canonical ``Group/var`` form. The payload
column is found by group membership, never by position.
"""

from collections.abc import Sequence

from dataextractor.errors import AmbiguousPayloadColumnError, NoPayloadColumnError


def is_in_group(name: str, group: str) -> bool:
    """Check whether a column name belongs to a group under either convention."""
    return name.startswith(f"{group}/") or name.endswith(f"@{group}")


def find_payload_column(column_names: Sequence[str], payload_group: str) -> int:
    """
    Find the index of the single column belonging to the payload group.

    Args:
        column_names: Column names as written in the file.
        payload_group: Group label identifying the payload column.

    Returns:
        Index of the payload column.

    Raises:
        NoPayloadColumnError: If no column belongs to the group.
        AmbiguousPayloadColumnError: If several columns belong to the group.
    """
    prefix = f"{payload_group}/"
    suffix = f"@{payload_group}"
    matches = [i for i, name in enumerate(column_names) if is_in_group(name, payload_group)]

    if not matches:
        msg = (
            f"No payload column found: no column name begins with '{prefix}' "
            f"or ends with '{suffix}'"
        )
        raise NoPayloadColumnError(msg)
    if len(matches) > 1:
        candidates = [column_names[i] for i in matches]
        msg = (
            "Multiple payload candidates found: more than one column name begins "
            f"with '{prefix}' or ends with '{suffix}': {candidates}"
        )
        raise AmbiguousPayloadColumnError(msg)

    return matches[0]


def to_canonical_name(name: str) -> str:
    """
    Convert a ``var@Group`` column name to ``Group/var``.

    Names without ``@`` are returned unchanged.
    """
    variable, sep, group = name.partition("@")
    if not sep:
        return name
    return f"{group}/{variable}"
