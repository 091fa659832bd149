"""Uldar — pluggable backend API extensions and widget rendering."""
