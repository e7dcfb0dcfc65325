"""
String rendering for map contents.

Formats:
- ListValueMap:    key:[v1,v2];key2:[v3]
- CompositeKeyMap: [k1,k2]:value;[k3,k4]:value2

Parts render with str(), except that None renders as an empty string and
nested lists/tuples render as their comma-joined parts.
"""

import collections.abc as _abc
import typing as _typing

import manymap.constants as constants


def render_part(value: _typing.Any) -> str:
    """Render a single key, key part or value."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return render_parts(value)
    return str(value)


def render_parts(values: _abc.Iterable[_typing.Any]) -> str:
    """Render a sequence as comma-joined parts."""
    return constants.PART_SEPARATOR.join(render_part(value) for value in values)


def render_list_entry(key: _typing.Any, values: _abc.Iterable[_typing.Any]) -> str:
    """Render a ListValueMap entry: key:[v1,v2]."""
    return f"{render_part(key)}{constants.KEY_VALUE_SEPARATOR}[{render_parts(values)}]"


def render_composite_entry(key_parts: _abc.Iterable[_typing.Any], value: _typing.Any) -> str:
    """Render a CompositeKeyMap entry: [k1,k2]:value."""
    return f"[{render_parts(key_parts)}]{constants.KEY_VALUE_SEPARATOR}{render_part(value)}"


def join_entries(rendered: _abc.Iterable[str]) -> str:
    """Join rendered entries with the entry separator."""
    return constants.ENTRY_SEPARATOR.join(rendered)
