"""
Committer

AI-powered commit message generation from staged git changes.
"""

__version__ = "0.5.0"

# Centralized commit types - single source of truth
# Used by: config/__init__.py (bundled formatting rules)
COMMIT_TYPES = {
    'feat': 'A new feature',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Changes that do not affect the meaning of the code',
    'refactor': 'A code change that neither fixes a bug nor adds a feature',
    'perf': 'A code change that improves performance',
    'test': 'Adding missing tests or correcting existing tests',
    'chore': 'Changes to the build process or auxiliary tools',
}
