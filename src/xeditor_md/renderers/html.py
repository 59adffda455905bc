#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/renderers/html.py
"""Document tree to editor HTML rendering.

The HTML renderer is the import half of the editor bridge: a tree parsed
from Markdown is rendered to an HTML string that the host editor loads
with ``setContent()``. Text is escaped with
:func:`~xeditor_md.utils.escape.escape_markup`, so characters typed in
Markdown are never reinterpreted as markup.

"""

from __future__ import annotations

from xeditor_md.constants import DOCUMENT_TAG, VOID_TAGS
from xeditor_md.options.base import BaseRendererOptions
from xeditor_md.renderers.base import BaseRenderer
from xeditor_md.tree.nodes import DocumentTree, Element, NodeId
from xeditor_md.utils.escape import escape_markup, escape_markup_attribute


class HtmlRenderer(BaseRenderer):
    """Render document trees to HTML.

    The virtual ``document`` root renders only its children, one top-level
    element per line. Void elements such as ``br``, ``hr`` and ``img`` have
    no closing tag.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer options

    Examples
    --------
        >>> from xeditor_md.tree import build_tree, paragraph, strong
        >>> HtmlRenderer().render_to_string(build_tree(paragraph("a < b ", strong("c"))))
        '<p>a &lt; b <strong>c</strong></p>'

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the HTML renderer."""
        BaseRenderer._validate_options_type(options, BaseRendererOptions, "html")
        super().__init__(options or BaseRendererOptions())

    def render_to_string(self, tree: DocumentTree, node_id: NodeId | None = None) -> str:
        """Render a tree, or the subtree at ``node_id``, to HTML."""
        start = tree.root if node_id is None else node_id
        if (tree.tag(start) or "").lower() == DOCUMENT_TAG:
            return "\n".join(self._render_node(tree, child) for child in tree.children(start))
        return self._render_node(tree, start)

    def _render_node(self, tree: DocumentTree, node_id: NodeId) -> str:
        record = tree.node(node_id)
        if not isinstance(record, Element):
            return escape_markup(record.content)

        tag = record.tag.lower()
        attributes = "".join(
            f' {name}="{escape_markup_attribute(value)}"' for name, value in record.attributes.items()
        )
        if tag in VOID_TAGS:
            return f"<{tag}{attributes}>"

        inner = "".join(self._render_node(tree, child) for child in record.children)
        return f"<{tag}{attributes}>{inner}</{tag}>"


def tree_to_html(tree: DocumentTree) -> str:
    """Render a tree to HTML with a fresh :class:`HtmlRenderer`."""
    return HtmlRenderer().render_to_string(tree)


__all__ = ["HtmlRenderer", "tree_to_html"]
