#pineconer/records.py
import json
import logging
from collections.abc import Mapping

from .errors import InvalidArgument
from .response import CREATED
from .utils import as_list, check_mapping, compact, namespace_path, tidy_result

logger = logging.getLogger(__name__)


def records_upsert(client, index, records, namespace=""):
    """
    Upsert records into an index with integrated embedding.
    Each record needs an ``_id`` (or ``id``); the body is sent as NDJSON.
    """
    if not isinstance(records, (list, tuple)) or not records:
        raise InvalidArgument("records must be a non-empty list.")
    for pos, rec in enumerate(records):
        if not isinstance(rec, Mapping) or not (rec.get("_id") or rec.get("id")):
            raise InvalidArgument(f"record {pos} must be a mapping with an '_id' field")

    host = client.index_host(index)
    body = "\n".join(json.dumps(rec) for rec in records)
    logger.debug("Upserting %d records into %s", len(records), index)
    return client.data("POST", host, namespace_path(namespace, "upsert"), body=body, success_codes=CREATED)


def _query_object(query, top_k):
    if isinstance(query, str):
        return {"top_k": top_k, "inputs": {"text": query}}
    if isinstance(query, Mapping):
        if not query.get("id"):
            raise InvalidArgument("a mapping query needs an 'id' field")
        return {"top_k": top_k, "id": query["id"]}
    if isinstance(query, (list, tuple)) and query and all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in query
    ):
        return {"top_k": top_k, "vector": {"values": list(query)}}
    raise InvalidArgument(
        "query must be a character string (text), numeric vector, or mapping with 'id' field."
    )


def records_search(client, index, query, namespace="", top_k=10, filter=None,
                   fields=None, rerank=None, tidy=True):
    """Semantic search over records; tidy widens the hit fields into fields_* columns."""
    query_obj = _query_object(query, top_k)
    if filter is not None:
        query_obj["filter"] = check_mapping("filter", filter)
    if rerank is not None and (not isinstance(rerank, Mapping) or not rerank.get("model")):
        raise InvalidArgument("rerank must be a mapping with at least a 'model' field.")
    if fields is not None:
        fields = as_list("fields", fields)

    host = client.index_host(index)
    body = compact({
        "query": query_obj,
        "fields": fields,
        "rerank": rerank,
    })
    result = client.data("POST", host, namespace_path(namespace, "search"), body=body)
    return tidy_result(result, "result", "hits") if tidy else result
