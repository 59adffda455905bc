"""Pytest configuration and shared fixtures for the xeditor-md test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from xeditor_md.tree import (
    DocumentTree,
    blockquote,
    build_tree,
    code_block,
    emphasis,
    heading,
    inline_code,
    link,
    list_item,
    ordered_list,
    paragraph,
    strong,
    table,
    table_row,
    thematic_break,
    unordered_list,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Restore root logger handlers changed by CLI tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_markdown() -> str:
    """Provide a Markdown document exercising every block construct.

    Returns
    -------
    str
        Markdown text in the form the serializer emits with default options.

    """
    return """# Sample Document

This is a **sample document** with *italic text* and some `inline code`

## Section 2

- Item 1
- Item 2
  - Nested item

1. First item
2. Second item

> Quoted text

```python
def hello_world():
    print("Hello, World!")
```

| Header 1 | Header 2 |
| --- | --- |
| Row 1 | Data 1 |

---

See [the docs](https://example.com/docs)"""


@pytest.fixture
def sample_tree() -> DocumentTree:
    """Provide the document tree that corresponds to ``sample_markdown``."""
    return build_tree(
        heading(1, "Sample Document"),
        paragraph(
            "This is a ",
            strong("sample document"),
            " with ",
            emphasis("italic text"),
            " and some ",
            inline_code("inline code"),
        ),
        heading(2, "Section 2"),
        unordered_list(
            list_item("Item 1"),
            list_item("Item 2", unordered_list(list_item("Nested item"))),
        ),
        ordered_list(list_item("First item"), list_item("Second item")),
        blockquote(paragraph("Quoted text")),
        code_block('def hello_world():\n    print("Hello, World!")', language="python"),
        table(
            table_row("Header 1", "Header 2", header=True),
            table_row("Row 1", "Data 1"),
        ),
        thematic_break(),
        paragraph("See ", link("https://example.com/docs", "the docs")),
    )

