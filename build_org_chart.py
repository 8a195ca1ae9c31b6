from pathlib import Path

from orgtree import log, process_records
from orgtree.config import ChartConfig
from orgtree.graph import render_png
from orgtree.html import write_html
from orgtree.loading import load_records
from orgtree.sample_data import SAMPLE_RECORDS

# -------------------------------------------
# CONFIG
# -------------------------------------------
INPUT_FILE = "ideal_final_output.xlsx"   # .xlsx, .csv or .json
SHEET_NAME = 0                           # first sheet; change if needed
OUTPUT_HTML = "org_chart.html"
OUTPUT_PNG = None                        # e.g. "org_chart" -> org_chart.png (needs Graphviz installed)
OPEN_BROWSER = True
COMPACT = False

# -------------------------------------------
# LOAD DATA
# -------------------------------------------
if Path(INPUT_FILE).exists():
    records = load_records(INPUT_FILE, sheet_name=SHEET_NAME)
else:
    log.warn(f"{INPUT_FILE} not found; using the sample design team")
    records = SAMPLE_RECORDS

# -------------------------------------------
# COUNT + RENDER
# -------------------------------------------
data = process_records(records)
config = ChartConfig(compact=COMPACT)

write_html(data, OUTPUT_HTML, config, open_browser=OPEN_BROWSER)

if OUTPUT_PNG:
    render_png(data, OUTPUT_PNG, config)
