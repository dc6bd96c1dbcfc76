"""GitHub URL helpers."""

from urllib.parse import urlsplit

from submission_validator.constants import (
    GITHUB_API_ROOT,
    GITHUB_ENTERPRISE_API_PATH,
    GITHUB_HOST,
)

# Minimum number of path parts expected for GitHub owner/repo
MIN_GITHUB_PARTS = 2


def parse_repository_url(url: str) -> tuple[str, str]:
    """Extract owner and repository name from a repository URL.

    A trailing slash and a ``.git`` suffix are tolerated.

    Args:
        url: Repository URL (e.g., https://github.com/acme/widget)

    Returns:
        Tuple of (owner, repo)

    Raises:
        ValueError: If the URL has no owner/repo path

    Examples:
        >>> parse_repository_url("https://github.com/acme/widget.git")
        ('acme', 'widget')

    """
    parts = [part for part in urlsplit(url).path.split("/") if part]
    if len(parts) < MIN_GITHUB_PARTS:
        msg = f"Invalid GitHub repository URL: {url}"
        raise ValueError(msg)

    owner, repo = parts[0], parts[1]
    repo = repo.removesuffix(".git")
    if not repo:
        msg = f"Invalid GitHub repository URL: {url}"
        raise ValueError(msg)
    return owner, repo


def api_root_for(url: str) -> str:
    """Return the REST API root serving the repository at ``url``.

    github.com maps to api.github.com; any other host is treated as a
    GitHub Enterprise instance serving its API below ``/api/v3``.
    """
    parts = urlsplit(url)
    host = (parts.hostname or "").lower()
    if host in (GITHUB_HOST, f"www.{GITHUB_HOST}"):
        return GITHUB_API_ROOT
    if not host:
        msg = f"Repository URL has no host: {url}"
        raise ValueError(msg)
    scheme = parts.scheme or "https"
    return f"{scheme}://{parts.netloc}{GITHUB_ENTERPRISE_API_PATH}"


def build_commit_api_url(repository_url: str, commit_hash: str) -> str:
    """Build the commit lookup endpoint for a repository.

    Args:
        repository_url: Repository URL as found in the submission
        commit_hash: Commit identifier, passed through unchecked

    Returns:
        ``<api root>/repos/<owner>/<repo>/commits/<hash>``

    Raises:
        ValueError: If the URL cannot be mapped to an API endpoint

    Examples:
        >>> build_commit_api_url("https://github.com/acme/widget", "abc")
        'https://api.github.com/repos/acme/widget/commits/abc'

    """
    owner, repo = parse_repository_url(repository_url)
    return (
        f"{api_root_for(repository_url)}/repos/{owner}/{repo}"
        f"/commits/{commit_hash}"
    )
