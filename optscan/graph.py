import html
import logging

from typing import Optional

from . import const, vt100
from .parser import Step

_logger = logging.getLogger(__name__)


def build(steps: list[Step], title: Optional[str] = None):
    """
    Builds a state diagram of a recorded scan: one node per scan state and
    one edge per raw string.
    """
    from graphviz import Digraph  # type: ignore

    g = Digraph(const.ARGV0, filename=const.GRAPH_FILE)

    g.attr("graph", rankdir="LR")
    g.attr("node", shape="ellipse")
    g.attr(
        "graph",
        label=f"<<B>{html.escape(title or 'Scan')}</B>>",
        labelloc="t",
    )

    ids: dict[str, str] = {}

    def node(state) -> str:
        name = str(state)
        if name not in ids:
            ids[name] = f"s{len(ids)}"
            g.node(
                ids[name],
                name,
                style="filled",
                fillcolor="lightgrey" if name == "args" else "lightblue",
            )
        return ids[name]

    for i, step in enumerate(steps):
        before = node(step.before)
        after = node(step.after)

        label = vt100.wordwrap(f"{i}: {step.raw!r} ({step.action})", 30, newline="\n")
        color = "#aaaaaa" if step.action in ("skip", "drop") else "black"
        g.edge(before, after, label=label, color=color)

    return g


def view(steps: list[Step], filename: str = const.GRAPH_FILE, title: Optional[str] = None):
    g = build(steps, title)
    _logger.info(f"Rendering scan graph to {filename}")
    g.view(filename=filename)
