"""
Tests for the FIFO frontier and small helpers used when building records
"""

from wikigraph.graph_manager import FrontierEntry, FrontierQueue
from wikigraph.utils.text import subject_from_url, truncate_preview

WIKI = "https://en.wikipedia.org/wiki/"


def test_frontier_is_first_in_first_out():
    frontier = FrontierQueue([FrontierEntry(WIKI + "A", 0)])
    frontier.extend([FrontierEntry(WIKI + "B", 1), FrontierEntry(WIKI + "C", 1)])
    frontier.enqueue(FrontierEntry(WIKI + "D", 2))

    order = []
    while frontier:
        order.append(frontier.dequeue().url)

    assert order == [WIKI + "A", WIKI + "B", WIKI + "C", WIKI + "D"]
    assert frontier.total_enqueued == 4


def test_dequeue_on_empty_frontier():
    frontier = FrontierQueue()

    assert frontier.dequeue() is None
    assert frontier.peek() is None
    assert len(frontier) == 0


def test_extend_reports_count():
    frontier = FrontierQueue()

    assert frontier.extend(FrontierEntry(WIKI + name, 1) for name in "XYZ") == 3
    assert frontier.peek().url == WIKI + "X"
    assert len(frontier) == 3


def test_subject_from_url():
    assert subject_from_url(WIKI + "Machine_learning") == "Machine learning"
    assert subject_from_url(WIKI + "Bayes%27_theorem") == "Bayes' theorem"
    assert subject_from_url("https://example.com/page") == ""


def test_truncate_preview():
    assert truncate_preview("a" * 301, 300) == "a" * 300 + "..."
    assert truncate_preview("a" * 300, 300) == "a" * 300
