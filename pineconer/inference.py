#pineconer/inference.py
from collections.abc import Mapping

from .errors import InvalidArgument
from .utils import as_list, check_choice, check_required, compact, tidy_result

INPUT_TYPES = ("passage", "query")
TRUNCATE = ("END", "NONE")


def embed(client, model, inputs, input_type="passage", truncate="END", tidy=True):
    """Embed text with a hosted model; ``tidy`` gives one row per input."""
    check_required("a model name", model)
    inputs = as_list("inputs", inputs)
    if not inputs or not all(isinstance(x, str) for x in inputs):
        raise InvalidArgument("Inputs must be a non-empty list of strings.")
    check_choice("input_type", input_type, INPUT_TYPES)
    check_choice("truncate", truncate, TRUNCATE)

    body = {
        "model": model,
        "inputs": [{"text": x} for x in inputs],
        "parameters": {"input_type": input_type, "truncate": truncate},
    }
    result = client.control("POST", "embed", body=body)
    return tidy_result(result, "data") if tidy else result


def _documents(documents):
    docs = as_list("documents", documents)
    if not docs:
        raise InvalidArgument("Please provide documents to rerank.")
    formatted = []
    for doc in docs:
        if isinstance(doc, str):
            formatted.append({"text": doc})
        elif isinstance(doc, Mapping):
            formatted.append(dict(doc))
        else:
            raise InvalidArgument("Documents must be strings or mappings.")
    return formatted


def rerank(client, model, query, documents, top_n=None, return_documents=True, tidy=True):
    """Score ``documents`` against ``query``; tidy widens document_* columns."""
    check_required("a model name", model)
    if not isinstance(query, str) or not query.strip():
        raise InvalidArgument("query must be a single non-empty string.")

    body = compact({
        "model": model,
        "query": query,
        "documents": _documents(documents),
        "top_n": top_n,
        "return_documents": return_documents,
    })
    result = client.control("POST", "rerank", body=body)
    return tidy_result(result, "data") if tidy else result
