"""
grumpinessy Package.

Style-conformance checks for syntax trees of brace-delimited, Java-like
languages. The trees come from an external parser; this package classifies
nodes, tracks per-scope state and reports violations such as wrong member
order, inconsistent braces or badly broken argument lists.

Usage
-----

.. code-block:: python

    from grumpinessy import AnalyzerConfig, analyze_tree, load_tree

    root = load_tree("Example.java.json")
    result = analyze_tree(root, AnalyzerConfig(checks=["members_order"]))
    for diagnostic in result.diagnostics:
        print(diagnostic.line, diagnostic.message)
"""

from grumpinessy.analyzer import AnalysisResult, analyze_tree, build_walker, get_check
from grumpinessy.config import AnalyzerConfig, MemberOrderSettings
from grumpinessy.diagnostics import CollectingReporter, Diagnostic, Reporter
from grumpinessy.enums import TokenType
from grumpinessy.ingestion import load_tree, parse_tree_json
from grumpinessy.syntax import SyntaxNode
from grumpinessy.walker import TreeWalker

__version__ = "0.1.0"

__all__ = [
  "AnalysisResult",
  "AnalyzerConfig",
  "CollectingReporter",
  "Diagnostic",
  "MemberOrderSettings",
  "Reporter",
  "SyntaxNode",
  "TokenType",
  "TreeWalker",
  "analyze_tree",
  "build_walker",
  "get_check",
  "load_tree",
  "parse_tree_json",
]
