"""PR triage bot - default labels, assignee and reviewers for pull requests."""

__version__ = "0.1.0"
