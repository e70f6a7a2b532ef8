#pineconer/indexes.py
import logging

from .errors import InvalidArgument
from .response import ACCEPTED, CREATED
from .utils import check_choice, check_mapping, check_required, compact

logger = logging.getLogger(__name__)

METRICS = ("cosine", "euclidean", "dotproduct")
POD_TYPES = tuple(f"{p}.{s}" for s in ("x1", "x2", "x4", "x8") for p in ("s1", "p1", "p2"))
DELETION_PROTECTION = ("enabled", "disabled")
DEFAULT_SPEC = {"serverless": {"cloud": "aws", "region": "us-east-1"}}


def list_indexes(client):
    return client.control("GET", "indexes")


def create_index(client, name, dimension, metric="cosine", spec=None, deletion_protection=None, tags=None):
    check_required("an index name", name)
    if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension < 1:
        raise InvalidArgument(f"dimension must be a positive integer, got {dimension!r}")
    check_choice("metric", metric, METRICS)
    check_mapping("spec", spec)
    if deletion_protection is not None:
        check_choice("deletion_protection", deletion_protection, DELETION_PROTECTION)

    body = compact({
        "name": name,
        "dimension": dimension,
        "metric": metric,
        "spec": spec or DEFAULT_SPEC,
        "deletion_protection": deletion_protection,
        "tags": check_mapping("tags", tags),
    })
    logger.info("Creating index %s (dimension=%s, metric=%s)", name, dimension, metric)
    return client.control("POST", "indexes", body=body, success_codes=CREATED)


def describe_index(client, index_name):
    """
    200 Configuration and status of the index, including its data-plane host.
    404 Index not found.
    """
    check_required("an index name", index_name)
    return client.control("GET", "indexes", index_name)


def delete_index(client, index_name):
    check_required("an index name", index_name)
    logger.info("Deleting index %s", index_name)
    return client.control("DELETE", "indexes", index_name, success_codes=ACCEPTED)


def configure_index(client, index_name, replicas=None, pod_type=None, deletion_protection=None, tags=None):
    """Scale a pod index (replicas / pod_type) or change its protection and tags."""
    check_required("an index name", index_name)
    if replicas is not None and (isinstance(replicas, bool) or not isinstance(replicas, int) or replicas < 1):
        raise InvalidArgument("Replicas must be a positive integer")
    if pod_type is not None and pod_type not in POD_TYPES:
        raise InvalidArgument(
            "Pod type must be one of predefined by Pinecone: " + ", ".join(POD_TYPES)
        )
    if deletion_protection is not None:
        check_choice("deletion_protection", deletion_protection, DELETION_PROTECTION)

    pod = compact({"replicas": replicas, "pod_type": pod_type})
    body = compact({
        "spec": {"pod": pod} if pod else None,
        "deletion_protection": deletion_protection,
        "tags": check_mapping("tags", tags),
    })
    if not body:
        raise InvalidArgument("Nothing to configure")
    return client.control("PATCH", "indexes", index_name, body=body, success_codes=ACCEPTED)
