#pineconer/api_client.py
import logging

from .auth import api_key_headers
from .config import ClientConfig
from .errors import HostNotFound
from .request import do_request
from .response import SUCCESS, normalize, error_excerpt
from .urls import control_plane_url, data_plane_url
from . import indexes as index_ops
from . import index_collections as collection_ops
from . import vectors as vector_ops
from . import inference as inference_ops
from . import records as record_ops
from . import bulk as bulk_ops
from . import assistants as assistant_ops
from . import assistant_files as file_ops
from . import assistant_chat as chat_ops

logger = logging.getLogger(__name__)


class PineconeClient:
    """Handles configuration, URL building and HTTP requests for the Pinecone API."""

    def __init__(self, config=None, api_key=None, **options):
        if config is None:
            config = ClientConfig(api_key, **options) if api_key else ClientConfig.from_env(**options)
        self.config = config

    def __repr__(self):
        return f"PineconeClient({self.config!r})"

    # ------------------ URLS ------------------
    def control_url(self, *segments):
        return control_plane_url(self.config.controller_url, *segments)

    def data_url(self, host, *segments):
        return data_plane_url(host, *segments)

    # ------------------ REQUEST ------------------
    def request(self, method, url, params=None, body=None, files=None, success_codes=SUCCESS):
        """Issue one call and normalize it into a ResultEnvelope."""
        headers = api_key_headers(
            self.config.api_key,
            api_version=self.config.api_version,
            json_body=files is None and body is not None,
        )
        if isinstance(body, str):
            headers["Content-Type"] = "application/x-ndjson"
        resp = do_request(
            method,
            url,
            headers=headers,
            params=params,
            body=body,
            files=files,
            timeout=self.config.timeout,
        )
        result = normalize(resp, success_codes)
        if result.status_code not in success_codes:
            logger.warning(
                "%s %s returned %s: %s", method, url, result.status_code, error_excerpt(result)
            )
        return result

    def control(self, method, *segments, **kwargs):
        return self.request(method, self.control_url(*segments), **kwargs)

    def data(self, method, host, *segments, **kwargs):
        return self.request(method, self.data_url(host, *segments), **kwargs)

    # ------------------ HOSTS ------------------
    def index_host(self, index_name):
        return _host_of(self.describe_index(index_name), "index", index_name)

    def assistant_host(self, assistant_name):
        return _host_of(self.describe_assistant(assistant_name), "assistant", assistant_name)

    # ------------------ INDEXES ------------------
    def list_indexes(self):
        return index_ops.list_indexes(self)

    def create_index(self, name, dimension, metric="cosine", spec=None, deletion_protection=None, tags=None):
        return index_ops.create_index(self, name, dimension, metric, spec, deletion_protection, tags)

    def describe_index(self, index_name):
        return index_ops.describe_index(self, index_name)

    def delete_index(self, index_name):
        return index_ops.delete_index(self, index_name)

    def configure_index(self, index_name, replicas=None, pod_type=None, deletion_protection=None, tags=None):
        return index_ops.configure_index(self, index_name, replicas, pod_type, deletion_protection, tags)

    # ------------------ COLLECTIONS ------------------
    def list_collections(self):
        return collection_ops.list_collections(self)

    def create_collection(self, name, source):
        return collection_ops.create_collection(self, name, source)

    def describe_collection(self, collection_name):
        return collection_ops.describe_collection(self, collection_name)

    def delete_collection(self, collection_name):
        return collection_ops.delete_collection(self, collection_name)

    # ------------------ VECTORS ------------------
    def describe_index_stats(self, index, filter=None):
        return vector_ops.describe_index_stats(self, index, filter)

    def vector_query(self, index, vector=None, top_k=5, filter=None, namespace="",
                     include_metadata=True, include_values=False, vector_id=None, tidy=True):
        return vector_ops.vector_query(
            self, index, vector, top_k, filter, namespace,
            include_metadata, include_values, vector_id, tidy,
        )

    def vector_fetch(self, index, ids, namespace="", tidy=True):
        return vector_ops.vector_fetch(self, index, ids, namespace, tidy)

    def vector_upsert(self, index, vectors=None, vector_id=None, values=None, metadata=None, namespace=""):
        return vector_ops.vector_upsert(self, index, vectors, vector_id, values, metadata, namespace)

    def vector_update(self, index, vector_id, values=None, metadata=None, namespace=""):
        return vector_ops.vector_update(self, index, vector_id, values, metadata, namespace)

    def vector_delete(self, index, ids=None, delete_all=False, namespace="", filter=None):
        return vector_ops.vector_delete(self, index, ids, delete_all, namespace, filter)

    # ------------------ INFERENCE ------------------
    def embed(self, model, inputs, input_type="passage", truncate="END", tidy=True):
        return inference_ops.embed(self, model, inputs, input_type, truncate, tidy)

    def rerank(self, model, query, documents, top_n=None, return_documents=True, tidy=True):
        return inference_ops.rerank(self, model, query, documents, top_n, return_documents, tidy)

    # ------------------ RECORDS ------------------
    def records_upsert(self, index, records, namespace=""):
        return record_ops.records_upsert(self, index, records, namespace)

    def records_search(self, index, query, namespace="", top_k=10, filter=None,
                       fields=None, rerank=None, tidy=True):
        return record_ops.records_search(self, index, query, namespace, top_k, filter, fields, rerank, tidy)

    # ------------------ BULK IMPORT ------------------
    def list_imports(self, index, limit=100, pagination_token=None, tidy=False):
        return bulk_ops.list_imports(self, index, limit, pagination_token, tidy)

    def start_import(self, index, uri, integration_id=None, error_mode="continue"):
        return bulk_ops.start_import(self, index, uri, integration_id, error_mode)

    def describe_import(self, index, import_id):
        return bulk_ops.describe_import(self, index, import_id)

    def cancel_import(self, index, import_id):
        return bulk_ops.cancel_import(self, index, import_id)

    # ------------------ ASSISTANTS ------------------
    def list_assistants(self):
        return assistant_ops.list_assistants(self)

    def create_assistant(self, name, instructions=None, metadata=None, region="us"):
        return assistant_ops.create_assistant(self, name, instructions, metadata, region)

    def describe_assistant(self, assistant_name):
        return assistant_ops.describe_assistant(self, assistant_name)

    def update_assistant(self, assistant_name, instructions=None, metadata=None):
        return assistant_ops.update_assistant(self, assistant_name, instructions, metadata)

    def delete_assistant(self, assistant_name):
        return assistant_ops.delete_assistant(self, assistant_name)

    # ------------------ ASSISTANT FILES ------------------
    def assistant_list_files(self, assistant_name, filter=None):
        return file_ops.list_files(self, assistant_name, filter)

    def assistant_upload_file(self, assistant_name, file_path, metadata=None, multimodal=None):
        return file_ops.upload_file(self, assistant_name, file_path, metadata, multimodal)

    def assistant_describe_file(self, assistant_name, file_id, include_url=False):
        return file_ops.describe_file(self, assistant_name, file_id, include_url)

    def assistant_delete_file(self, assistant_name, file_id):
        return file_ops.delete_file(self, assistant_name, file_id)

    # ------------------ ASSISTANT CHAT ------------------
    def assistant_chat(self, assistant_name, messages, model=None, filter=None, context_options=None):
        return chat_ops.chat(self, assistant_name, messages, model, filter, context_options)

    def assistant_chat_completions(self, assistant_name, messages, model=None):
        return chat_ops.chat_completions(self, assistant_name, messages, model)

    def assistant_context(self, assistant_name, query, filter=None, top_k=None, snippet_size=None):
        return chat_ops.context(self, assistant_name, query, filter, top_k, snippet_size)

    def assistant_evaluate(self, question, answer, ground_truth_answer):
        return chat_ops.evaluate(self, question, answer, ground_truth_answer)


def _host_of(result, kind, name):
    host = result.content.get("host") if isinstance(result.content, dict) else None
    if not host:
        raise HostNotFound(kind, name, result.status_code)
    return host
