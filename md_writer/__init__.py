"""MD Writer - utilities that make writing Markdown easier."""

__version__ = "0.1.0"

from md_writer.config.constants import LF
from md_writer.exceptions import (
    FragmentTooLargeError,
    InvalidHeadingLevelError,
    MdWriterError,
)
from md_writer.markdown import (
    code_fence,
    code_span,
    fenced_code_block,
    fenced_js_code_block,
    fenced_rs_code_block,
    fenced_sh_code_block,
    fenced_ts_code_block,
    h1,
    h2,
    h3,
    h4,
    h5,
    h6,
    heading,
)

__all__ = [
    "__version__",
    "LF",
    # Exceptions
    "MdWriterError",
    "FragmentTooLargeError",
    "InvalidHeadingLevelError",
    # Builders
    "code_fence",
    "code_span",
    "fenced_code_block",
    "fenced_js_code_block",
    "fenced_rs_code_block",
    "fenced_sh_code_block",
    "fenced_ts_code_block",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "heading",
]
