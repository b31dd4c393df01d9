"""Git Operations Package"""

from committer.git.repository import GitRepository
from committer.errors import GitError

__all__ = [
    "GitRepository",
    "GitError",
]
