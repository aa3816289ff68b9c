# norte_api/errors.py
"""Failure classes shared by the lookup, the preview renderer and the API.

A slug that matches no record is not an error: lookups return ``None``.
"""


class StoreFailure(Exception):
    """The backing store is unreachable or a query failed."""


class AssetMissing(Exception):
    """The client shell (``index.html``) could not be read."""

    def __init__(self, path):
        super().__init__(f"Client shell not found at {path}")
        self.path = path
