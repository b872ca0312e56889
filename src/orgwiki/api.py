"""The major exported API functions for Org to wiki export."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/orgwiki/api.py
import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Mapping, Optional, Sequence, Union

from orgwiki.ast.nodes import NODE_CLASSES, Node
from orgwiki.ast.serialization import json_to_ast
from orgwiki.ast.tree import DocumentTree
from orgwiki.exceptions import FileError, OutputWriteError, UnhandledNodeTypeError
from orgwiki.options.wiki import WikiRendererOptions
from orgwiki.renderers.base import BaseRenderer
from orgwiki.renderers.context import RenderContext
from orgwiki.renderers.wiki import WikiRenderer
from orgwiki.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def _is_known_node(node: object) -> bool:
    """Tell whether ``node`` is an instance of one of the node kinds."""
    return isinstance(node, Node) and NODE_CLASSES.get(type(node).node_type) is type(node)


def _create_options_from_kwargs(options: Optional[WikiRendererOptions], **kwargs: Any) -> WikiRendererOptions:
    """Merge keyword arguments into wiki options.

    Keyword arguments override fields of ``options`` (or of the defaults).
    Unknown names are logged and ignored.

    """
    base = options or WikiRendererOptions()
    option_names = {field.name for field in fields(WikiRendererOptions)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown renderer options: {missing}")
    return base.create_updated(**valid_kwargs) if valid_kwargs else base


class WikiExporter:
    """Export a document tree to wiki markup.

    The exporter walks the tree in post-order. Each node's children are
    rendered first and their fragments concatenated; the node's handler then
    receives that text (or None when the node has no children) together with
    the shared :class:`~orgwiki.renderers.context.RenderContext`.

    Parameters
    ----------
    options : WikiRendererOptions or None, default None
        Rendering options
    id_locations : mapping of str to str, optional
        Ids defined in other documents, mapped to their files
    renderer : WikiRenderer or None, default None
        Handler set to use; built from ``options`` when omitted

    Examples
    --------
        >>> from orgwiki.ast import Document, Paragraph, PlainText
        >>> doc = Document(children=[Paragraph(children=[PlainText(value="Hi")])])
        >>> WikiExporter().export(doc)
        '"Hi"\\n\\n'

    """

    def __init__(
        self,
        options: Optional[WikiRendererOptions] = None,
        id_locations: Optional[Mapping[str, str]] = None,
        renderer: Optional[WikiRenderer] = None,
    ):
        """Initialize the exporter."""
        BaseRenderer._validate_options_type(options, WikiRendererOptions, "wiki")
        self.options = options or WikiRendererOptions()
        self.id_locations = dict(id_locations or {})
        self.renderer = renderer or WikiRenderer(self.options)

    def export(self, root: Node) -> str:
        """Render ``root`` and return the wiki text.

        Parameters
        ----------
        root : Node
            Root of the tree, usually a Document

        Returns
        -------
        str
            Rendered text

        Raises
        ------
        UnhandledNodeTypeError
            If the tree contains an object of unknown kind and the policy is
            ``"raise"``

        """
        if not _is_known_node(root):
            return self._unknown(root)

        with debug_timer(logger, "Indexing"):
            tree = DocumentTree(root, self.id_locations)

        ctx: RenderContext

        def render_nodes(nodes: Sequence[Node]) -> str:
            return "".join(self._render(node, ctx) for node in nodes)

        ctx = RenderContext(options=self.options, tree=tree, render_nodes=render_nodes)
        with debug_timer(logger, f"Rendering ({self.options.dialect_style})"):
            return self._render(root, ctx)

    def export_to_file(self, root: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render ``root`` and write it in the configured output coding.

        Raises
        ------
        OutputWriteError
            If the output cannot be written or encoded

        """
        text = self.export(root)
        try:
            BaseRenderer.write_text_output(text, output, encoding=self.options.output_coding)
        except (OSError, UnicodeEncodeError) as e:
            raise OutputWriteError(str(getattr(output, "name", output)), original_error=e) from e
        logger.info("Wrote %d characters (%s)", len(text), self.options.output_coding)

    def _render(self, node: Node, ctx: RenderContext) -> str:
        if not _is_known_node(node):
            return self._unknown(node)
        children = node.child_nodes
        contents = "".join(self._render(child, ctx) for child in children) if children else None
        return node.accept(self.renderer, contents, ctx)

    def _unknown(self, node: object) -> str:
        node_type = type(node).__name__
        if self.options.unknown_node_policy == "skip":
            logger.warning("Skipping unknown node type: %s", node_type)
            return ""
        raise UnhandledNodeTypeError(node_type)


def load_document(source: Union[str, Path], strict_mode: bool = True) -> Node:
    """Load a document tree from a JSON file.

    Parameters
    ----------
    source : str or Path
        Path of the JSON file
    strict_mode : bool, default True
        Reject unknown node types and fields

    Returns
    -------
    Node
        Root of the loaded tree

    Raises
    ------
    FileError
        If the file cannot be read
    ParsingError
        If the file does not hold a valid tree

    """
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Could not read document tree: {path}", file_path=str(path), original_error=e) from e
    logger.debug("Loaded %d bytes from %s", len(text), path)
    return json_to_ast(text, strict_mode=strict_mode)


def to_wiki(
    source: Union[Node, str, Path],
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    options: Optional[WikiRendererOptions] = None,
    id_locations: Optional[Mapping[str, str]] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Export a document tree to wiki markup.

    Parameters
    ----------
    source : Node, str or Path
        Tree root, or the path of a JSON tree file
    output : str, Path, IO[bytes], IO[str] or None, default None
        Destination. When None, the text is returned.
    options : WikiRendererOptions or None, default None
        Base options
    id_locations : mapping of str to str, optional
        Ids defined in other documents, mapped to their files
    **kwargs
        Individual option overrides, e.g. ``dialect_style="creole"``

    Returns
    -------
    str or None
        Rendered text when ``output`` is None

    Examples
    --------
        >>> to_wiki(document, dialect_style="creole", with_tags=False)

    """
    final_options = _create_options_from_kwargs(options, **kwargs)
    root = source if isinstance(source, Node) else load_document(source)
    exporter = WikiExporter(final_options, id_locations=id_locations)
    if output is None:
        return exporter.export(root)
    exporter.export_to_file(root, output)
    return None
