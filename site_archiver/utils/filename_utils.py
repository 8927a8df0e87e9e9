# ==============================================================================
# filename_utils.py — Output filename derivation
# ==============================================================================
# Purpose: Map a canonical page URL to the base name of its HTML/PDF files
# ==============================================================================

__all__ = ["derive_filename"]

INDEX_FILENAME = "index"


def derive_filename(url: str, host: str = "") -> str:
    """Derive a filesystem-safe base name from *url*.

    ``https://site/a/b/`` becomes ``a-b``, ``https://site/page.html`` becomes
    ``page`` and the site root becomes ``index``.
    """
    name = url
    if host and name.startswith(host):
        name = name[len(host):]
    if name.startswith("/"):
        name = name[1:]
    if name.endswith("/"):
        name = name[:-1]
    name = name.replace("/", "-")
    if name.endswith(".html"):
        name = name[:-len(".html")]

    return name or INDEX_FILENAME
