#pineconer/assistant_chat.py
from collections.abc import Mapping

from .errors import InvalidArgument
from .utils import check_mapping, check_required


def _messages(messages):
    if isinstance(messages, str):
        messages = [messages]
    if not isinstance(messages, (list, tuple)) or not messages:
        raise InvalidArgument("messages must be a non-empty list.")
    out = []
    for msg in messages:
        if isinstance(msg, str):
            out.append({"role": "user", "content": msg})
        elif isinstance(msg, Mapping) and "content" in msg:
            out.append(dict(msg))
        else:
            raise InvalidArgument("each message must be a string or a mapping with 'content'")
    return out


def chat(client, assistant_name, messages, model=None, filter=None, context_options=None):
    """Non-streaming chat with an assistant, answers carry citations."""
    check_required("an assistant name", assistant_name)
    body = {"messages": _messages(messages), "stream": False}
    if model is not None:
        body["model"] = model
    if filter is not None:
        body["filter"] = check_mapping("filter", filter)
    if context_options is not None:
        body["context_options"] = check_mapping("context_options", context_options)
    host = client.assistant_host(assistant_name)
    return client.data("POST", host, "assistant", "chat", assistant_name, body=body)


def chat_completions(client, assistant_name, messages, model=None):
    """OpenAI-compatible chat completions endpoint."""
    check_required("an assistant name", assistant_name)
    body = {"messages": _messages(messages)}
    if model is not None:
        body["model"] = model
    host = client.assistant_host(assistant_name)
    return client.data(
        "POST", host, "assistant", "chat", assistant_name, "chat", "completions", body=body
    )


def context(client, assistant_name, query, filter=None, top_k=None, snippet_size=None):
    check_required("an assistant name", assistant_name)
    check_required("a query", query)
    body = {"query": query}
    if filter is not None:
        body["filter"] = check_mapping("filter", filter)
    if top_k is not None:
        body["top_k"] = top_k
    if snippet_size is not None:
        body["snippet_size"] = snippet_size
    host = client.assistant_host(assistant_name)
    return client.data("POST", host, "assistant", "chat", assistant_name, "context", body=body)


def evaluate(client, question, answer, ground_truth_answer):
    """Score ``answer`` against ``ground_truth_answer`` for correctness and completeness."""
    check_required("a question", question)
    check_required("an answer", answer)
    check_required("a ground truth answer", ground_truth_answer)
    body = {"question": question, "answer": answer, "ground_truth_answer": ground_truth_answer}
    return client.control("POST", "assistant", "evaluation", "metrics", "alignment", body=body)
