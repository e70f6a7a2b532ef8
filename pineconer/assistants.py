#pineconer/assistants.py
import logging

from .utils import check_choice, check_mapping, check_required

logger = logging.getLogger(__name__)

REGIONS = ("us", "eu")


def list_assistants(client):
    return client.control("GET", "assistant", "assistants")


def create_assistant(client, name, instructions=None, metadata=None, region="us"):
    check_required("an assistant name", name)
    check_choice("region", region, REGIONS)
    body = {"name": name}
    if instructions is not None:
        body["instructions"] = instructions
    if metadata is not None:
        body["metadata"] = check_mapping("metadata", metadata)
    body["region"] = region
    logger.info("Creating assistant %s in %s", name, region)
    return client.control("POST", "assistant", "assistants", body=body)


def describe_assistant(client, assistant_name):
    """Status and data-plane host of an assistant."""
    check_required("an assistant name", assistant_name)
    return client.control("GET", "assistant", "assistants", assistant_name)


def update_assistant(client, assistant_name, instructions=None, metadata=None):
    check_required("an assistant name", assistant_name)
    body = {}
    if instructions is not None:
        body["instructions"] = instructions
    if metadata is not None:
        body["metadata"] = check_mapping("metadata", metadata)
    return client.control("PATCH", "assistant", "assistants", assistant_name, body=body)


def delete_assistant(client, assistant_name):
    check_required("an assistant name", assistant_name)
    logger.info("Deleting assistant %s", assistant_name)
    return client.control("DELETE", "assistant", "assistants", assistant_name)
