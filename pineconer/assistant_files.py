#pineconer/assistant_files.py
import json
import os

from .errors import InvalidArgument
from .utils import check_mapping, check_required


def list_files(client, assistant_name, filter=None):
    check_required("an assistant name", assistant_name)
    params = {"filter": json.dumps(check_mapping("filter", filter))} if filter else None
    host = client.assistant_host(assistant_name)
    return client.data("GET", host, "assistant", "files", assistant_name, params=params)


def upload_file(client, assistant_name, file_path, metadata=None, multimodal=None):
    """Upload a local file (multipart) for the assistant to index."""
    check_required("an assistant name", assistant_name)
    check_required("a file path", file_path)
    if not os.path.isfile(file_path):
        raise InvalidArgument(f"File not found: {file_path}")

    params = {}
    if metadata is not None:
        params["metadata"] = json.dumps(check_mapping("metadata", metadata))
    if multimodal is not None:
        params["multimodal"] = str(bool(multimodal)).lower()

    host = client.assistant_host(assistant_name)
    with open(file_path, "rb") as fh:
        files = {"file": (os.path.basename(file_path), fh)}
        return client.data(
            "POST", host, "assistant", "files", assistant_name,
            params=params or None, files=files,
        )


def describe_file(client, assistant_name, file_id, include_url=False):
    check_required("an assistant name", assistant_name)
    check_required("a file id", file_id)
    host = client.assistant_host(assistant_name)
    params = {"include_url": "true"} if include_url else None
    return client.data("GET", host, "assistant", "files", assistant_name, file_id, params=params)


def delete_file(client, assistant_name, file_id):
    check_required("an assistant name", assistant_name)
    check_required("a file id", file_id)
    host = client.assistant_host(assistant_name)
    return client.data("DELETE", host, "assistant", "files", assistant_name, file_id)
