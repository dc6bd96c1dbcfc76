"""Outcome taxonomy for a validation run.

Every run ends in exactly one ``Outcome``. Members carry a stable numeric
code, which becomes the process exit status, and a fixed user-facing
message with troubleshooting hints.
"""

from enum import Enum


class Outcome(Enum):
    """Named, coded result of a validation run.

    Note:
        INPUT_FILE_NOT_FOUND and SCHEMA_NOT_FOUND share code 2 to stay
        exit-code compatible with existing automation. They are still
        distinct members because their messages differ.

    """

    SUCCESS = (0, "✅ XML File Validation Successful")

    MISSING_INPUT_PATH = (
        1,
        "❌ Argument Error\n"
        "No input path specified\n"
        "\n"
        "Troubleshooting:\n"
        "- Provide path to XML file as argument",
    )

    INPUT_FILE_NOT_FOUND = (
        2,
        "❌ File Access Error\n"
        "Specified input file not found\n"
        "\n"
        "Troubleshooting:\n"
        "- Verify exact file path spelling\n"
        "- Check file exists at location\n"
        "- Validate read permissions\n"
        "- Ensure path contains no special characters",
    )

    SCHEMA_NOT_FOUND = (
        2,
        "❌ Schema Configuration Error\n"
        "Required validation schema is missing\n"
        "\n"
        "Troubleshooting:\n"
        "- Verify schema file in submission_validator/schema/\n"
        "- Check schema file name matches 'submission.xsd'",
    )

    SCHEMA_VALIDATION_ERROR = (
        3,
        "❌ XML Structure Error\n"
        "Document structure violates schema requirements\n"
        "\n"
        "Troubleshooting:\n"
        "- Check all required fields are present\n"
        "- Verify element order matches schema\n"
        "- Ensure text content matches expected types\n"
        "- Validate element nesting hierarchy",
    )

    REPOSITORY_VALIDATION_FAILED = (
        4,
        "❌ Repository Access Error\n"
        "GitHub repository validation unsuccessful\n"
        "\n"
        "Troubleshooting:\n"
        "- Verify repository URL is correct\n"
        "- Check repository visibility (must be public)\n"
        "- Ensure network connectivity\n"
        "- Validate URL formatting",
    )

    COMMIT_VALIDATION_FAILED = (
        5,
        "❌ Commit Verification Error\n"
        "Specified commit not found in repository\n"
        "\n"
        "Troubleshooting:\n"
        "- Verify 40-character SHA-1 hash format\n"
        "- Check commit exists in remote history\n"
        "- Validate repository permissions",
    )

    UNEXPECTED_ERROR = (
        6,
        "🔥 Unexpected Application Error\n"
        "An unexpected failure occurred during validation\n"
        "\n"
        "Troubleshooting:\n"
        "- Check network connection stability\n"
        "- Verify input file integrity\n"
        "- Retry validation process",
    )

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message

    @property
    def is_success(self) -> bool:
        """Return True only for the successful outcome."""
        return self is Outcome.SUCCESS
