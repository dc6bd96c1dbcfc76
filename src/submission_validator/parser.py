"""Deserialization of schema-valid submission documents."""

from pathlib import Path
from xml.etree import ElementTree

from submission_validator.constants import (
    ELEMENT_COMMIT_HASH,
    ELEMENT_GITHUB_USERNAME,
    ELEMENT_NAME,
    ELEMENT_REPOSITORY_NAME,
    ELEMENT_REPOSITORY_URL,
    ELEMENT_STUDENT_ID,
)
from submission_validator.domain.submission import Submission
from submission_validator.logger import get_logger

logger = get_logger(__name__)


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def parse_submission(xml_file: Path) -> Submission:
    """Parse a submission document into a ``Submission``.

    Element lookup ignores namespaces. The document is expected to be
    schema-valid already, so failures here are not mapped to a named
    outcome.

    Args:
        xml_file: Path to the XML document

    Returns:
        Parsed submission record

    Raises:
        ElementTree.ParseError: If the document is not well-formed
        ValueError: If a required element is missing

    """
    root = ElementTree.parse(xml_file).getroot()

    fields: dict[str, str] = {}
    for child in root:
        if isinstance(child.tag, str):
            fields.setdefault(local_name(child.tag), (child.text or "").strip())

    required = (
        ELEMENT_NAME,
        ELEMENT_STUDENT_ID,
        ELEMENT_COMMIT_HASH,
        ELEMENT_GITHUB_USERNAME,
        ELEMENT_REPOSITORY_NAME,
        ELEMENT_REPOSITORY_URL,
    )
    missing = [element for element in required if element not in fields]
    if missing:
        msg = f"Missing required element(s): {', '.join(missing)}"
        raise ValueError(msg)

    submission = Submission(
        name=fields[ELEMENT_NAME],
        student_id=fields[ELEMENT_STUDENT_ID],
        last_commit_hash=fields[ELEMENT_COMMIT_HASH],
        github_username=fields[ELEMENT_GITHUB_USERNAME],
        repository_name=fields[ELEMENT_REPOSITORY_NAME],
        repository_url=fields[ELEMENT_REPOSITORY_URL],
    )
    logger.debug(
        "Parsed submission for %s (%s)",
        submission.github_username,
        submission.repository_url,
    )
    return submission
