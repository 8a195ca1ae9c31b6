from graphviz import Digraph

from orgtree import log
from orgtree.config import ChartConfig


def build_label(item):
    """
    Line 1: Name
    Line 2: Title
    Line 3: report count (only for managers)
    """
    lines = [item.get("name") or item["id"]]
    title = (item.get("title") or "").strip()
    if title:
        lines.append(title)
    total = item.get("totalDescendants") or 0
    if total:
        lines.append(f"({total} report{'s' if total != 1 else ''})")
    return "\n".join(lines)


def build_digraph(records, config=None):
    config = config or ChartConfig()

    dot = Digraph(comment="Org Chart", format="png")
    dot.graph_attr.update(
        rankdir=config.rankdir,
        splines="ortho",
        nodesep="0.25",
        ranksep="0.4",
    )
    dot.node_attr.update(
        shape="box",
        style="rounded,filled",
        fillcolor=config.node_fill,
        color="#555555",
        fontname=config.font,
        fontsize="10",
    )
    dot.edge_attr.update(color="#888888", arrowsize="0.7")

    ids = {item["id"] for item in records}

    # NODES
    for item in records:
        if item.get("parentId") is None:
            dot.node(item["id"], label=build_label(item), fillcolor=config.root_fill,
                     style="rounded,filled,bold", penwidth="1.3")
        else:
            dot.node(item["id"], label=build_label(item))

    # EDGES (manager -> report, only if both nodes exist)
    for item in records:
        manager_id = item.get("parentId")
        if manager_id is not None and manager_id in ids:
            dot.edge(manager_id, item["id"])

    return dot


def render_png(records, output_file, config=None):
    dot = build_digraph(records, config)
    output_path = dot.render(filename=output_file, cleanup=True)
    log.info(f"PNG org chart generated: {output_path}")
    return output_path
