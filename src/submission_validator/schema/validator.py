"""XSD validation of submission documents.

The schema ships inside the package and is located with
``importlib.resources``; a missing resource is a packaging defect and is
reported separately from an invalid input document.
"""

from importlib import resources
from pathlib import Path
from xml.etree import ElementTree
from xml.etree.ElementTree import ParseError

import xmlschema

from submission_validator.constants import SCHEMA_PACKAGE, SCHEMA_RESOURCE_NAME
from submission_validator.domain.outcome import Outcome
from submission_validator.exceptions import ValidationFailure
from submission_validator.logger import get_logger
from submission_validator.parser import local_name

logger = get_logger(__name__)


def _strip_namespaces(root: ElementTree.Element) -> None:
    """Rewrite every element tag in place to its local name."""
    for element in root.iter():
        if isinstance(element.tag, str):
            element.tag = local_name(element.tag)


class SchemaValidator:
    """Validates XML files against a bundled XSD."""

    def __init__(
        self,
        resource_name: str = SCHEMA_RESOURCE_NAME,
        package: str = SCHEMA_PACKAGE,
    ) -> None:
        """Initialize validator for a bundled schema resource.

        Args:
            resource_name: File name of the XSD inside ``package``
            package: Package holding the schema resource

        """
        self.resource_name = resource_name
        self.package = package
        self._schema: xmlschema.XMLSchema | None = None

    def _load_schema(self) -> xmlschema.XMLSchema:
        """Load and compile the bundled schema once per instance.

        Raises:
            ValidationFailure: SCHEMA_NOT_FOUND if the resource is missing

        """
        if self._schema is not None:
            return self._schema

        try:
            resource = resources.files(self.package).joinpath(
                self.resource_name
            )
            found = resource.is_file()
        except ModuleNotFoundError:
            found = False

        if not found:
            logger.error(
                "Bundled schema %s missing from %s",
                self.resource_name,
                self.package,
            )
            raise ValidationFailure(
                Outcome.SCHEMA_NOT_FOUND, target=self.resource_name
            )

        with resource.open("rb") as stream:
            self._schema = xmlschema.XMLSchema(stream)
        return self._schema

    def validate(self, xml_file: Path) -> None:
        """Validate a document against the schema.

        The caller must already have confirmed that ``xml_file`` exists.
        Element namespaces are dropped before validation, so a document in
        any namespace is checked against the same un-namespaced schema.

        Args:
            xml_file: Path to the XML document

        Raises:
            ValidationFailure: SCHEMA_NOT_FOUND or SCHEMA_VALIDATION_ERROR

        """
        schema = self._load_schema()

        with xml_file.open("rb") as stream:
            try:
                document = ElementTree.parse(stream)
                _strip_namespaces(document.getroot())
                schema.validate(document)
            except (xmlschema.XMLSchemaException, ParseError) as e:
                logger.debug("Schema validation failed for %s: %s", xml_file, e)
                raise ValidationFailure(
                    Outcome.SCHEMA_VALIDATION_ERROR,
                    cause=e,
                    target=str(xml_file),
                ) from e

        logger.debug("Schema validation passed: %s", xml_file)
