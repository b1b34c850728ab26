"""
Client for the institutional records service (CMS).
Looks up a person's record by RIN or RCS id.
"""

import json
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from nominations import config
from nominations.schema import InstitutionalRecord

logger = logging.getLogger(__name__)


class RecordLookupError(RuntimeError):
    """The records service could not be reached or returned an unusable response."""


class RecordNotFoundError(RecordLookupError):
    """The records service does not know the identifier."""


def get_cms_info(url: str, token: Optional[str] = None, timeout: Optional[int] = None) -> InstitutionalRecord:
    """
    Fetch and parse one record.

    CMS answers unknown identifiers with 200 and an empty body, so an empty
    body is the only "not found" signal.

    Raises:
        RecordNotFoundError: empty response body
        RecordLookupError: transport error, non-200 status, or malformed payload
    """
    headers = {"Authorization": f"Token {config.CMS_TOKEN if token is None else token}"}
    try:
        response = requests.get(url, headers=headers, timeout=timeout or config.CMS_TIMEOUT)
    except requests.exceptions.RequestException as e:
        logger.error(f"unable to reach CMS: {e}")
        raise RecordLookupError(f"unable to reach CMS: {e}") from e

    if response.status_code != 200:
        raise RecordLookupError(
            f"unexpected status code: {response.status_code}, body: {response.text}"
        )

    body = response.text.strip()
    if not body:
        raise RecordNotFoundError(f"no record at {url}")

    try:
        return InstitutionalRecord.model_validate(json.loads(body))
    except (json.JSONDecodeError, ValidationError) as e:
        raise RecordLookupError(f"unable to decode CMS response: {e}") from e


def cms_info_rin(rin: int) -> InstitutionalRecord:
    return get_cms_info(f"{config.CMS_URL}/users/view_rin/{rin}/")


def cms_info_rcs(rcs: str) -> InstitutionalRecord:
    return get_cms_info(f"{config.CMS_URL}/users/view_rcs/{rcs}/")
