"""Global constants for the application."""

# Container layout
DOCUMENT_MEMBER = "DOMDocument.xml"  # Root document inside an FLA/XFL container
LIBRARY_PREFIX = "LIBRARY"  # Folder holding symbol items and other library assets

# Render settings
DEFAULT_SCALE = 1.0  # Source units to pixels
DEFAULT_PADDING_PER_SCALE = 20.0  # Default padding is this times the scale
STROKE_WIDTH = 20.0  # Stroke width before scaling, fixed for every stroke style
CURVE_SEGMENTS = 16  # Line pieces used to flatten a quadratic curve

# Timeline settings
DEFAULT_FRAME_RATE = 24  # Used when the document does not declare frameRate

# Colors
DEFAULT_COLOR = (0, 0, 0)  # A solid color without a value is black
