"""Markdown fragment builders for MD Writer."""

from md_writer.markdown.code import (
    code_fence,
    code_span,
    fenced_code_block,
    fenced_js_code_block,
    fenced_rs_code_block,
    fenced_sh_code_block,
    fenced_ts_code_block,
)
from md_writer.markdown.headers import h1, h2, h3, h4, h5, h6, heading

__all__ = [
    # Code
    "code_fence",
    "code_span",
    "fenced_code_block",
    "fenced_js_code_block",
    "fenced_rs_code_block",
    "fenced_sh_code_block",
    "fenced_ts_code_block",
    # Headers
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "heading",
]
