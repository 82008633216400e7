"""Central configuration for the bounding box editor.

All tunable defaults are defined here with descriptive names.
Per-workspace overrides live in the settings file (see annotations/settings.py).
"""

# =============================================================================
# COORDINATE PRECISION
# =============================================================================

# Decimal places used when the image size is unknown (0 x 0)
DECIMAL_PLACES_FALLBACK = 2

# Upper bound on decimal places, regardless of image size
# Precision otherwise follows the digit count of the largest image dimension
DECIMAL_PLACES_CAP = 8

# =============================================================================
# ANNOTATION FORMATS
# =============================================================================

# Format used when nothing is cached, detected or configured
DEFAULT_BBOX_FORMAT = "coco"

# YOLO class written for boxes without a label
YOLO_DEFAULT_CLASS = "0"

# Where the YOLO class goes on output lines ("first" or "last")
YOLO_DEFAULT_LABEL_POSITION = "last"

# Page index written at the end of every Tesseract .box line
TESSERACT_PAGE_INDEX = "0"

# =============================================================================
# WORKSPACE LAYOUT
# =============================================================================

# Settings file, relative to the workspace root
SETTINGS_FILENAME = ".bbox-editor.json"

# Annotation file extensions looked up next to each image, in priority order
DEFAULT_ALLOWED_EXTENSIONS = (".txt",)

# Extension used for a new annotation file when no allowed extension is concrete
DEFAULT_BBOX_EXTENSION = ".txt"

# Wildcard entry in the allowed extensions list (any "<stem>.*" file)
WILDCARD_EXTENSION = "*"
