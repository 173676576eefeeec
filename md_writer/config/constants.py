"""Constants for MD Writer."""

# Application constants
APP_NAME = "md-writer"
DEFAULT_CONFIG_FILE = "md-writer.yaml"

# The line feed control character, used to join every multi-line fragment
LF = "\n"

# Code fences
CODE_FENCE_CHAR = "`"
CODE_FENCE_LENGTH = 3
CODE_SPAN_DELIMITER = "`"

# Info strings for the language-tagged fenced code blocks
JAVASCRIPT_INFO_STRING = "javascript"
RUST_INFO_STRING = "rust"
SHELL_INFO_STRING = "shell"
TYPESCRIPT_INFO_STRING = "typescript"

# Headings
H1_UNDERLINE_CHAR = "="
H2_UNDERLINE_CHAR = "-"
ATX_HEADING_CHAR = "#"
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# Defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HEADING_LEVEL = 2
