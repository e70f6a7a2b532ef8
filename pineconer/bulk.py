#pineconer/bulk.py
from .errors import InvalidArgument
from .mapping import FlatTable
from .utils import check_choice, check_required, compact, tidy_result

ERROR_MODES = ("continue", "abort")
TIMESTAMP_COLUMNS = ("createdAt", "finishedAt")


def list_imports(client, index, limit=100, pagination_token=None, tidy=False):
    """One page of bulk imports; pass the returned ``pagination.next`` to continue."""
    if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= 100:
        raise InvalidArgument("limit must be an integer between 1 and 100")
    host = client.index_host(index)
    params = compact({"limit": limit, "paginationToken": pagination_token})
    result = client.data("GET", host, "bulk", "imports", params=params)
    if not tidy:
        return result
    result = tidy_result(result, "data")
    table = result.content
    if isinstance(table, FlatTable):
        types = {c: "timestamp" for c in TIMESTAMP_COLUMNS if c in table.columns}
        result = result.replace_content(table.cast(types))
    return result


def start_import(client, index, uri, integration_id=None, error_mode="continue"):
    check_required("a URI", uri)
    check_choice("error_mode", error_mode, ERROR_MODES)
    host = client.index_host(index)
    body = compact({
        "uri": uri,
        "errorMode": {"onError": error_mode},
        "integrationId": integration_id,
    })
    return client.data("POST", host, "bulk", "imports", body=body)


def describe_import(client, index, import_id):
    check_required("an import id", import_id)
    host = client.index_host(index)
    return client.data("GET", host, "bulk", "imports", import_id)


def cancel_import(client, index, import_id):
    check_required("an import id", import_id)
    host = client.index_host(index)
    return client.data("DELETE", host, "bulk", "imports", import_id)
