from .errors import ConfigurationError


def api_key_headers(api_key, api_version=None, json_body=True):
    """Headers sent with every request."""
    if not api_key:
        raise ConfigurationError("API key is required")
    headers = {"Api-Key": api_key, "Accept": "application/json"}
    if json_body:
        headers["Content-Type"] = "application/json"
    if api_version:
        headers["X-Pinecone-API-Version"] = api_version
    return headers
