class ColorError(ValueError):
    """Raised when a color component is non-finite or outside its valid range."""
