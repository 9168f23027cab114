"""Helpers for GitLab projects, project members, deploy tokens, hooks and variables."""