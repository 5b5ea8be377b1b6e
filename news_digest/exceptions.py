class DigestGenerationError(Exception):
    """Raised when collecting and analyzing articles fails as a whole."""
