"""Code fragment builders.

Code spans, code fences and fenced code blocks, following the CommonMark 0.30
textual conventions:

- https://spec.commonmark.org/0.30/#code-span
- https://spec.commonmark.org/0.30/#code-fence
- https://spec.commonmark.org/0.30/#fenced-code-blocks
- https://spec.commonmark.org/0.30/#info-string

Input text is emitted verbatim. Backticks or line breaks inside an info string,
and backtick runs inside code, are not escaped.
"""

from md_writer.config.constants import (
    CODE_FENCE_CHAR,
    CODE_FENCE_LENGTH,
    CODE_SPAN_DELIMITER,
    JAVASCRIPT_INFO_STRING,
    LF,
    RUST_INFO_STRING,
    SHELL_INFO_STRING,
    TYPESCRIPT_INFO_STRING,
)


def code_fence(info_string: str | None = None) -> str:
    """Create a Markdown code fence.

    Args:
        info_string: Optional info string, usually a language name. ``None``
            and ``""`` both produce a bare fence.

    Returns:
        Three backticks followed by the info string

    Example:
        >>> code_fence("rust")
        '```rust'
        >>> code_fence()
        '```'
    """
    return CODE_FENCE_CHAR * CODE_FENCE_LENGTH + (info_string or "")


def code_span(code: str) -> str:
    """Create a Markdown code span.

    Example:
        >>> code_span('print("Hello world!")')
        '`print("Hello world!")`'
    """
    return f"{CODE_SPAN_DELIMITER}{code}{CODE_SPAN_DELIMITER}"


def fenced_code_block(code: str, info_string: str | None = None) -> str:
    """Create a Markdown fenced code block.

    The closing fence never carries an info string. Lines are always joined
    with a line feed.

    Args:
        code: Code to enclose, kept as-is including internal line feeds
        info_string: Optional info string for the opening fence

    Returns:
        Opening fence, code and closing fence joined by line feeds

    Example:
        >>> fenced_code_block("x = 1", "python")
        '```python\\nx = 1\\n```'
    """
    return LF.join([code_fence(info_string), code, code_fence(None)])


def fenced_js_code_block(code: str) -> str:
    """Create a fenced code block with a JavaScript info string."""
    return fenced_code_block(code, JAVASCRIPT_INFO_STRING)


def fenced_rs_code_block(code: str) -> str:
    """Create a fenced code block with a Rust info string."""
    return fenced_code_block(code, RUST_INFO_STRING)


def fenced_sh_code_block(code: str) -> str:
    """Create a fenced code block with a shell script info string."""
    return fenced_code_block(code, SHELL_INFO_STRING)


def fenced_ts_code_block(code: str) -> str:
    """Create a fenced code block with a TypeScript info string."""
    return fenced_code_block(code, TYPESCRIPT_INFO_STRING)
