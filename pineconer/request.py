import logging

import requests

logger = logging.getLogger(__name__)


def do_request(method, url, headers=None, params=None, body=None, files=None, timeout=30):
    """
    Perform a single HTTP request, logging transport errors.

    Non-success status codes are returned as-is; only connection level
    failures raise.
    """
    logger.debug("%s %s", method, url)
    try:
        return requests.request(
            method,
            url,
            headers=headers,
            params=params,
            json=body if isinstance(body, (dict, list)) else None,
            data=body if isinstance(body, (str, bytes)) else None,
            files=files,
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.warning("Request failed: %s %s: %s", method, url, e)
        raise
