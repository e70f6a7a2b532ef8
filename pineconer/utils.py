#pineconer/utils.py
from collections.abc import Mapping

from .errors import InvalidArgument
from .mapping import FlatTable, flatten, normalize_items


def compact(body):
    """Drop keys whose value is None."""
    return {k: v for k, v in body.items() if v is not None}


def check_required(name, value):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgument(f"Please provide {name}.")
    return value


def check_choice(name, value, allowed):
    if value not in allowed:
        raise InvalidArgument(f"{name} must be one of {', '.join(map(repr, allowed))}, got {value!r}")
    return value


def check_mapping(name, value):
    if value is not None and not isinstance(value, Mapping):
        raise InvalidArgument(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def as_list(name, value):
    """Accept a single string or a sequence, always return a list."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise InvalidArgument(f"{name} must be a string or a list, got {type(value).__name__}")


def namespace_path(namespace, action):
    """records/namespaces/{ns}/{action}, the default namespace has no segment."""
    if namespace:
        return f"records/namespaces/{namespace}/{action}"
    return f"records/namespaces/{action}"


def tidy_result(result, *path):
    """
    Replace a successful envelope's content with a FlatTable of the items
    found under ``path``. Failed or bodiless results, and bodies without a
    list under ``path``, are returned untouched.
    """
    if result.content is None:
        return result
    node = result.content
    for key in path[:-1]:
        node = node.get(key) if isinstance(node, Mapping) else None
    items = normalize_items(node, path[-1])
    if items is None:
        return result
    return result.replace_content(flatten(items) if items else FlatTable())
