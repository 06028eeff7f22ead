"""
Syntax Tree Ingestion.

Trees are produced by an external parser and handed over as JSON. Each node is
an object with a `kind` (a `TokenType` name), its position, optional token
`text`, and its `children`:

.. code-block:: json

    {"kind": "PACKAGE_DEF", "line": 1, "column": 0, "children": [
      {"kind": "DOT", "line": 1, "column": 9, "text": ".", "children": [
        {"kind": "IDENT", "line": 1, "column": 8, "text": "a"},
        {"kind": "IDENT", "line": 1, "column": 10, "text": "b"}
      ]}
    ]}

Kinds outside the built-in vocabulary are kept as opaque kinds. Nodes are
validated one at a time with Pydantic while the tree is built with an explicit
stack, so deeply nested documents (long call chains) do not hit recursion
limits beyond those of the JSON decoder itself.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from grumpinessy.enums import TokenType
from grumpinessy.errors import TreeLoadError
from grumpinessy.syntax import SyntaxNode


class NodeModel(BaseModel):
  """
  Serialized form of a single syntax node. Children are validated separately.
  """

  kind: str = Field(..., description="Node kind name, e.g. METHOD_CALL.")
  line: int = Field(..., ge=1, description="1-based line number.")
  column: int = Field(0, ge=0, description="0-based column number.")
  text: str = Field("", description="Text of the node's first token.")
  children: List[Dict[str, Any]] = Field(default_factory=list)

  @field_validator("kind")
  @classmethod
  def validate_kind(cls, v: str) -> str:
    if not v.isidentifier():
      raise ValueError(f"Invalid node kind: {v!r}")
    return v


def _make_node(data: Any, where: str) -> Tuple[SyntaxNode, NodeModel]:
  try:
    model = NodeModel.model_validate(data)
  except ValidationError as e:
    raise TreeLoadError(f"Invalid node ({where}): {e}") from e
  node = SyntaxNode(TokenType(model.kind), model.line, model.column, text=model.text)
  return node, model


def build_tree(document: Any) -> SyntaxNode:
  """
  Converts a decoded JSON document into a linked `SyntaxNode` tree.

  Args:
      document: The root node object, as returned by `json.loads`.

  Returns:
      SyntaxNode: The root of the built tree.

  Raises:
      TreeLoadError: If any node is malformed.
  """
  root, root_model = _make_node(document, "root")
  pending = [(root, root_model)]
  while pending:
    node, model = pending.pop()
    for index, child_data in enumerate(model.children):
      child, child_model = _make_node(child_data, f"child {index} of {node!r}")
      node.append(child)
      pending.append((child, child_model))
  return root


def parse_tree_json(text: Union[str, bytes]) -> SyntaxNode:
  """
  Parses a JSON document into a syntax tree.

  Args:
      text: The JSON document.

  Returns:
      SyntaxNode: The root node.

  Raises:
      TreeLoadError: If the document is not a valid serialized tree.
  """
  try:
    document = json.loads(text)
  except ValueError as e:
    # JSONDecodeError, or UnicodeDecodeError for undecodable bytes
    raise TreeLoadError(f"Invalid JSON: {e}") from e
  except RecursionError as e:
    raise TreeLoadError("Syntax tree document is nested too deeply to decode") from e
  return build_tree(document)


def load_tree(path: Path) -> SyntaxNode:
  """
  Reads a serialized syntax tree from a file.

  Args:
      path: Location of the JSON document.

  Returns:
      SyntaxNode: The root node.

  Raises:
      TreeLoadError: If the file cannot be read or is not a valid tree.
  """
  try:
    content = Path(path).read_bytes()
  except OSError as e:
    raise TreeLoadError(f"Cannot read {path}: {e}") from e
  return parse_tree_json(content)
