"""Prompt templates.

Placeholders are ``{name}`` tokens filled in a single literal pass by
``PromptBuilder``: {formatting_rules}, {scopes_section}, {scope_instruction},
{commit_context} and {diff}.
"""

SUMMARY_ONLY = """\
Below is a git diff of staged changes. Please analyze it and create a commit message with ONLY a summary line (NO body).

{formatting_rules}
{scopes_section}
Scope:
{scope_instruction}

Git Diff:
```
{diff}
```

Respond ONLY with the commit message summary line, nothing else."""

SUMMARY_AND_BODY = """\
Below is a git diff of staged changes. Please analyze it and create a commit message with a summary line and a detailed body:

<summary line>
<blank line>
<body with more detailed explanation>

{formatting_rules}
{scopes_section}
Scope:
{scope_instruction}

Body guidelines:
- Add a blank line between summary and body
- Use the body to explain why the change was made, incorporating the user's context
- Wrap each line in the body at 80 characters maximum
- Break the body into multiple paragraphs if needed

User's context for this change: {commit_context}

Git Diff:
```
{diff}
```

Respond ONLY with the commit message text (summary and body), nothing else."""

NO_SCOPE_INSTRUCTION = "- DO NOT include a scope in your commit message"
CHOOSE_SCOPE_INSTRUCTION = "- Choose an appropriate scope from the list above if relevant to the change"
