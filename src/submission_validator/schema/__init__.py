"""Bundled XSD and schema validation."""

from submission_validator.schema.validator import SchemaValidator

__all__ = ["SchemaValidator"]
