"""Submission record parsed from a schema-valid document."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Submission:
    """The six fields of a submission document.

    Attributes:
        name: Display name of the student
        student_id: Student identifier (``matrikelnummer``)
        last_commit_hash: Commit to verify, usually a 40-character SHA-1
        github_username: Account handle on GitHub
        repository_name: Repository name
        repository_url: Public repository URL

    """

    name: str
    student_id: str
    last_commit_hash: str
    github_username: str
    repository_name: str
    repository_url: str
