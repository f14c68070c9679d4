"""Breadcrumb extraction from a syntax tree.

Given a row, walks the tree from the root and collects the signatures of the
declarations enclosing that row, rendered as comments. The extractor keeps a
row cursor so that a declaration already captured for an earlier chunk is
never captured again.
"""

from scopechunk.ports.parsers import SyntaxNode

# Substring match against node types, so the same set covers the naming
# conventions of different grammars (function_definition, class_declaration,
# method_declaration, function_item, ...).
CONTEXT_NODE_TYPES = ("_declaration", "_definition", "function_expression", "function_item")

# Exact node types of the body child excluded from a header.
BODY_NODE_TYPES = frozenset({"block", "statement_block", "class_body", "declaration_list"})


def should_include_in_context(node: SyntaxNode) -> bool:
    """Check whether a node is a declaration whose signature belongs in a breadcrumb."""
    return any(pattern in node.type for pattern in CONTEXT_NODE_TYPES)


def format_context(context_path: list[str]) -> str:
    """Render breadcrumb entries as the prefix of a chunk.

    Args:
        context_path: Rendered headers, outer to inner.

    Returns:
        Entries joined by newlines with a trailing newline, or "" if empty.
    """
    if not context_path:
        return ""
    return "\n".join(context_path) + "\n"


class ContextExtractor:
    """Collects comment-rendered declaration headers enclosing a row.

    One extractor serves one chunking run over one file. Its cursor,
    last_context_row, only moves forward.

    Args:
        source: File contents encoded as UTF-8 (the tree's byte offsets index it).
        comment_marker: Marker prefixed onto every header line.
    """

    def __init__(self, source: bytes, comment_marker: str) -> None:
        self._source = source
        self._comment_marker = comment_marker
        self.last_context_row = -1

    def node_header(self, node: SyntaxNode) -> tuple[str, int]:
        """Render the signature of a declaration node.

        The signature is the node's text up to its body child, or the whole
        node when it has no body.

        Args:
            node: Declaration node.

        Returns:
            Tuple of (rendered header, row where the header ends).
        """
        end_byte = node.end_byte
        end_row = node.end_point[0]
        for child in node.children:
            if child.type in BODY_NODE_TYPES:
                end_byte = child.start_byte
                end_row = child.start_point[0]
                break

        text = self._source[node.start_byte : end_byte].decode("utf-8", errors="replace")
        rendered = "\n".join(f"{self._comment_marker} {line}" for line in text.split("\n"))
        return rendered.strip(), end_row

    def extract(self, root: SyntaxNode, row: int) -> list[str]:
        """Collect headers of not-yet-captured declarations covering a row.

        Every node covering the row is visited in pre-order, so headers come
        out outer to inner. A declaration qualifies only if it starts after
        the cursor; capturing it advances the cursor to the end of its header.

        Args:
            root: Root node of the file's tree.
            row: Target row (0-indexed).

        Returns:
            Rendered headers, outer to inner. Empty if nothing new encloses the row.
        """
        context_path: list[str] = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.start_point[0] > row or node.end_point[0] < row:
                continue
            if should_include_in_context(node) and node.start_point[0] > self.last_context_row:
                header, header_end_row = self.node_header(node)
                self.last_context_row = header_end_row
                context_path.append(header)
            stack.extend(reversed(node.children))
        return context_path
