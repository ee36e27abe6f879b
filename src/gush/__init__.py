"""gush: interactive pull request workflow for GitHub."""
