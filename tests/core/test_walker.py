"""
Tests for the TreeWalker traversal driver.

Verifies:
1.  Subscribed checks see visit/leave calls in depth-first order.
2.  A check failing with UnsupportedNodeError is disabled for the tree only.
3.  Other checks keep running after a failure.
"""

import logging

from grumpinessy.checks.base import BaseCheck
from grumpinessy.diagnostics import CollectingReporter
from grumpinessy.enums import TokenType
from grumpinessy.errors import UnsupportedNodeError
from grumpinessy.walker import TreeWalker
from tests.trees import n


class RecordingCheck(BaseCheck):
  name = "recording"
  tokens = (TokenType.OBJBLOCK, TokenType.METHOD_DEF)

  def __init__(self):
    super().__init__(CollectingReporter())
    self.events = []

  def begin_tree(self, root):
    self.events.append(("begin", root.kind.value))

  def visit_token(self, node):
    self.events.append(("visit", node.kind.value))

  def leave_token(self, node):
    self.events.append(("leave", node.kind.value))

  def finish_tree(self, root):
    self.events.append(("finish", root.kind.value))


class ExplodingCheck(BaseCheck):
  name = "exploding"
  tokens = (TokenType.METHOD_DEF,)

  def __init__(self):
    super().__init__(CollectingReporter())
    self.visits = 0

  def visit_token(self, node):
    self.visits += 1
    raise UnsupportedNodeError(node)


def sample_tree():
  body = n("OBJBLOCK", 1, 0, n("METHOD_DEF", 2, 2), n("METHOD_DEF", 3, 2))
  return n("CLASS_DEF", 1, 0, body)


def test_visit_and_leave_order():
  check = RecordingCheck()
  failures = TreeWalker([check]).process(sample_tree())
  assert failures == []
  assert check.events == [
    ("begin", "CLASS_DEF"),
    ("visit", "OBJBLOCK"),
    ("visit", "METHOD_DEF"),
    ("leave", "METHOD_DEF"),
    ("visit", "METHOD_DEF"),
    ("leave", "METHOD_DEF"),
    ("leave", "OBJBLOCK"),
    ("finish", "CLASS_DEF"),
  ]


def test_failing_check_is_disabled_for_tree(caplog):
  exploding = ExplodingCheck()
  recording = RecordingCheck()
  walker = TreeWalker([exploding, recording])

  with caplog.at_level(logging.ERROR):
    failures = walker.process(sample_tree())

  assert exploding.visits == 1
  assert len(failures) == 1
  failure = failures[0]
  assert failure.check == "exploding"
  assert (failure.line, failure.column) == (2, 2)
  assert "METHOD_DEF" in failure.message
  assert "exploding" in caplog.text

  # The other check saw the whole tree
  assert ("finish", "CLASS_DEF") in recording.events
  assert recording.events.count(("visit", "METHOD_DEF")) == 2


def test_failed_check_runs_again_on_next_tree():
  exploding = ExplodingCheck()
  walker = TreeWalker([exploding])
  walker.process(sample_tree())
  failures = walker.process(sample_tree())
  assert exploding.visits == 2
  assert len(failures) == 1


def test_unsubscribed_kinds_are_not_dispatched():
  check = RecordingCheck()
  TreeWalker([check]).process(n("COMPILATION_UNIT", 1, 0, n("IMPORT", 1), n("SEMI", 1)))
  assert check.events == [("begin", "COMPILATION_UNIT"), ("finish", "COMPILATION_UNIT")]
