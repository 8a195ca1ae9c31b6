from dataclasses import dataclass

# -------------------------------------------
# INPUT COLUMNS (adjust if your file uses different names)
# -------------------------------------------
COL_ID = "Unique Identifier"
COL_NAME = "Name"
COL_REPORTS_TO = "Reports To"
COL_TITLE = "Line Detail 1"
COL_IMAGE = "Image URL"

DEFAULT_COLUMNS = {
    "id": COL_ID,
    "parentId": COL_REPORTS_TO,
    "name": COL_NAME,
    "title": COL_TITLE,
    "imageUrl": COL_IMAGE,
}

# -------------------------------------------
# RENDERER ASSETS
# -------------------------------------------
D3_URL = "https://d3js.org/d3.v7.min.js"
FLEXTREE_URL = "https://cdn.jsdelivr.net/npm/d3-flextree@2.1.2/build/d3-flextree.js"
ORG_CHART_URL = "https://cdn.jsdelivr.net/npm/d3-org-chart@3.1.1"


@dataclass
class ChartConfig:
    """Settings handed to the chart renderer alongside the data."""

    node_width: int = 285
    node_height: int = 130
    root_margin: int = 75
    compact: bool = False
    image_size: int = 75

    # expand/collapse button: (background, text) when expanded / collapsed
    button_expanded: tuple = ("#edf3ff", "#4482a7")
    button_collapsed: tuple = ("#0297f1", "#bdfeff")

    link_color: str = "#f3f6ff"
    link_highlight_color: str = "#152785"

    # static output
    rankdir: str = "TB"        # "TB" = top-bottom, "LR" = left-right
    font: str = "Helvetica"
    root_fill: str = "#e3f2fd"
    node_fill: str = "#f9f9f9"
