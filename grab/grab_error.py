class GrabError(Exception):
    pass


class InvalidPageError(GrabError, TypeError):
    """Raised when a page fetch callable returns something other than a Page or an
    (items, next_page_id) tuple."""
