#pineconer/vectors.py
import logging
from collections.abc import Mapping

from .errors import InvalidArgument
from .utils import as_list, check_mapping, check_required, compact, tidy_result

logger = logging.getLogger(__name__)


def _numeric_list(name, values):
    if isinstance(values, (str, bytes, Mapping)) or not hasattr(values, "__iter__"):
        raise InvalidArgument(f"{name} must be a sequence of numbers")
    values = list(values)
    if not values:
        raise InvalidArgument(f"{name} must not be empty")
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values):
        raise InvalidArgument(f"{name} must be a sequence of numbers")
    return values


def describe_index_stats(client, index, filter=None):
    """Vector counts per namespace, dimension and fullness of an index."""
    check_mapping("filter", filter)
    host = client.index_host(index)
    body = compact({"filter": filter})
    return client.data("POST", host, "describe_index_stats", body=body)


def vector_query(client, index, vector=None, top_k=5, filter=None, namespace="",
                 include_metadata=True, include_values=False, vector_id=None, tidy=True):
    """
    Nearest-neighbour query by vector values or by the id of a stored vector.
    With ``tidy`` the matches are returned as a FlatTable (metadata widened
    into metadata_<key> columns).
    """
    if (vector is None) == (vector_id is None):
        raise InvalidArgument("Provide exactly one of vector or vector_id")
    if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 1:
        raise InvalidArgument(f"top_k must be a positive integer, got {top_k!r}")
    if vector is not None:
        vector = _numeric_list("vector", vector)
    check_mapping("filter", filter)

    host = client.index_host(index)
    body = compact({
        "vector": vector,
        "id": vector_id,
        "topK": top_k,
        "filter": filter or None,
        "includeMetadata": include_metadata,
        "includeValues": include_values,
        "namespace": namespace,
    })
    result = client.data("POST", host, "query", body=body)
    return tidy_result(result, "matches") if tidy else result


def vector_fetch(client, index, ids, namespace="", tidy=True):
    ids = as_list("ids", ids)
    if not ids:
        raise InvalidArgument("Please provide at least one id.")
    host = client.index_host(index)
    params = {"ids": ids}
    if namespace:
        params["namespace"] = namespace
    result = client.data("GET", host, "vectors", "fetch", params=params)
    return tidy_result(result, "vectors") if tidy else result


def _vector_record(item):
    if not isinstance(item, Mapping) or "id" not in item or "values" not in item:
        raise InvalidArgument("each vector must be a mapping with 'id' and 'values'")
    record = {"id": str(item["id"]), "values": _numeric_list("values", item["values"])}
    for key in ("metadata", "sparseValues"):
        if item.get(key) is not None:
            record[key] = item[key]
    return record


def vector_upsert(client, index, vectors=None, vector_id=None, values=None, metadata=None, namespace=""):
    """Write a batch of vectors, or a single one given by id/values/metadata."""
    if vectors is None:
        check_required("a vector id", vector_id)
        vectors = [{"id": vector_id, "values": values, "metadata": check_mapping("metadata", metadata)}]
    elif vector_id is not None or values is not None or metadata is not None:
        raise InvalidArgument("Pass either vectors or vector_id/values/metadata, not both")
    if not isinstance(vectors, (list, tuple)) or not vectors:
        raise InvalidArgument("vectors must be a non-empty list")
    records = [_vector_record(v) for v in vectors]

    host = client.index_host(index)
    body = {"vectors": records, "namespace": namespace}
    logger.debug("Upserting %d vectors into %s", len(vectors), index)
    return client.data("POST", host, "vectors", "upsert", body=body)


def vector_update(client, index, vector_id, values=None, metadata=None, namespace=""):
    check_required("a vector id", vector_id)
    if values is None and metadata is None:
        raise InvalidArgument("Provide values and/or metadata to update")
    if values is not None:
        values = _numeric_list("values", values)
    check_mapping("metadata", metadata)

    host = client.index_host(index)
    body = compact({
        "id": str(vector_id),
        "values": values,
        "setMetadata": metadata,
        "namespace": namespace,
    })
    return client.data("POST", host, "vectors", "update", body=body)


def vector_delete(client, index, ids=None, delete_all=False, namespace="", filter=None):
    """Delete by ids, by metadata filter, or everything in a namespace."""
    if ids is None and not delete_all and filter is None:
        raise InvalidArgument("Provide ids, a filter or delete_all=True")
    if ids is not None:
        ids = as_list("ids", ids)
        if not ids and not delete_all and filter is None:
            raise InvalidArgument("Please provide at least one id.")
    check_mapping("filter", filter)

    host = client.index_host(index)
    body = compact({
        "ids": ids,
        "deleteAll": bool(delete_all),
        "namespace": namespace,
        "filter": filter,
    })
    return client.data("POST", host, "vectors", "delete", body=body)
