"""Namespace extension modules: one retrieve_* entry point per namespace payload."""
