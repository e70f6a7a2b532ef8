"""Test doubles for the HTTP layer."""

import json
from collections import namedtuple

import requests

CONTROL = "https://api.pinecone.io"
INDEX_HOST = "my-index-abc123.svc.us-east-1-aws.pinecone.io"
ASSISTANT_HOST = "prod-1-data.ke.pinecone.io"

Call = namedtuple("Call", ["method", "url", "kwargs"])


def make_response(status_code, body=None, url=CONTROL):
    """Build a real requests.Response without touching the network."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.encoding = "utf-8"
    if body is None:
        resp._content = b""
    elif isinstance(body, bytes):
        resp._content = body
    elif isinstance(body, str):
        resp._content = body.encode("utf-8")
    else:
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    return resp


class FakeHttp:
    """Routes (method, url) to canned responses and records every call."""

    def __init__(self):
        self.routes = {}
        self.calls = []
        self.error = None

    def add(self, method, url, status=200, body=None):
        self.routes[(method, url)] = (status, body)

    def __call__(self, method, url, **kwargs):
        files = kwargs.get("files")
        if files:
            # read while the caller still holds the file open
            kwargs["uploaded"] = {k: (v[0], v[1].read()) for k, v in files.items()}
        self.calls.append(Call(method, url, kwargs))
        if self.error is not None:
            raise self.error
        status, body = self.routes.get((method, url), (404, {"error": {"message": "Not found"}}))
        return make_response(status, body, url)

    def last(self, method=None):
        calls = [c for c in self.calls if method is None or c.method == method]
        return calls[-1]
