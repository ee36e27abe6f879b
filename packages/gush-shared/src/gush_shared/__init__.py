"""Gateways shared by the gush CLI: git, processes, prompts and GitHub."""
