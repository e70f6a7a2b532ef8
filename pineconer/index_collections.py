#pineconer/index_collections.py
from .response import ACCEPTED, CREATED
from .utils import check_required


def list_collections(client):
    return client.control("GET", "collections")


def create_collection(client, name, source):
    """Snapshot the pod index ``source`` into a collection called ``name``."""
    check_required("a collection name", name)
    check_required("a source index", source)
    body = {"name": name, "source": source}
    return client.control("POST", "collections", body=body, success_codes=CREATED)


def describe_collection(client, collection_name):
    check_required("a collection name", collection_name)
    return client.control("GET", "collections", collection_name)


def delete_collection(client, collection_name):
    check_required("a collection name", collection_name)
    return client.control("DELETE", "collections", collection_name, success_codes=ACCEPTED)
