# Filesystem side of the browser: path confinement, entry classification, listing.
# Created: 2026-10-19

from dirbrowse.fs.entries import EntryMetadataError, classify_entry, entry_kind
from dirbrowse.fs.listing import list_directory
from dirbrowse.fs.paths import is_served_root, resolve_request_path

__all__ = [
    "EntryMetadataError",
    "classify_entry",
    "entry_kind",
    "is_served_root",
    "list_directory",
    "resolve_request_path",
]
