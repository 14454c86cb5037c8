"""Pluggable destinations for rendered log lines."""
