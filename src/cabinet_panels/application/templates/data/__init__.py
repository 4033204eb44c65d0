"""Bundled template configuration files."""
