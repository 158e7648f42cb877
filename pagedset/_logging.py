import logging

# Create the library logger
logger = logging.getLogger("pagedset")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def build_context(strategy: str, skip: int, size: int, want_total: bool) -> dict[str, object]:
    """
    Builds the structured 'extra' context attached to builder log records.
    Only positional metadata is logged, never the elements of a source.
    """
    return {"strategy": strategy, "skip": skip, "size": size, "want_total": want_total}
