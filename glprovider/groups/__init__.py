"""Helpers for GitLab groups, group members and group deploy tokens."""