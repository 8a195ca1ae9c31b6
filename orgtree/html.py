import json
import os
import webbrowser

from orgtree import log
from orgtree.config import D3_URL, FLEXTREE_URL, ORG_CHART_URL, ChartConfig

# -------------------------------------------
# HTML TEMPLATE (d3-org-chart via CDN)
# -------------------------------------------
# Layout, zoom, fit and compact mode all belong to d3-org-chart. This page
# only feeds it data and the node/button/link templates.
HTML_TEMPLATE = '''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Org Chart</title>
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <style>
    html, body {
      margin: 0;
      padding: 0;
      height: 100%;
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif;
      background: #f5f5f7;
    }
    .toolbar {
      position: absolute;
      top: 10px;
      left: 16px;
      z-index: 10;
    }
    .toolbar button {
      margin-right: 6px;
      padding: 6px 12px;
      border-radius: 6px;
      border: 1px solid #d0d7de;
      background: #ffffff;
      cursor: pointer;
    }
    #chart-container {
      width: 100%;
      height: 100vh;
      background: linear-gradient(180deg, #f5f5f7 0%, #ffffff 40%);
    }
  </style>
</head>
<body>
  <div class="toolbar">
    <button id="zoom-out">-</button>
    <button id="zoom-in">+</button>
    <button id="fit">Fit</button>
    <button id="compact">Compact</button>
  </div>
  <div id="chart-container"></div>

  <script src="__D3_URL__"></script>
  <script src="__FLEXTREE_URL__"></script>
  <script src="__ORG_CHART_URL__"></script>

  <script>
    // Data and settings injected from Python
    var orgData = __ORG_DATA__;
    var cfg = __CHART_CONFIG__;
    var isCompact = cfg.compact;

    var chart = new d3.OrgChart();
    var defaultLinkUpdate = chart.linkUpdate();

    chart
      .container('#chart-container')
      .data(orgData)
      .rootMargin(cfg.rootMargin)
      .nodeWidth(function(d) { return cfg.nodeWidth; })
      .nodeHeight(function(d) { return cfg.nodeHeight; })
      .compact(isCompact)
      .linkUpdate(function(d, i, arr) {
        defaultLinkUpdate.bind(this)(d, i, arr);
        d3.select(this).attr('stroke', function(d) {
          return d.data._upToTheRootHighlighted ? cfg.linkHighlightColor : cfg.linkColor;
        });
      })
      .nodeContent(function(d, i, arr, state) {
        var imageDim = cfg.imageSize;
        return (
          '<div style="background-color:white; position:absolute; width:' + d.width + 'px; height:' + d.height + 'px; border-radius:6px; border: 1px #9b9dac;">' +
            '<img src="' + d.data.imageUrl + '" style="position:absolute; margin-top:' + (d.height / 2 - imageDim / 2) + 'px; margin-left:15px; border-radius:70px; width:' + imageDim + 'px; height:' + imageDim + 'px;" />' +
            '<div style="color:#313035; font-weight:bold; font-size:21px; position:absolute; top:42px; left:' + (30 + imageDim) + 'px;">' + (d.data.name || '') + '</div>' +
            '<div style="color:#464648; font-size:16px; position:absolute; left:' + (30 + imageDim) + 'px; top:72px;">' + (d.data.title || '') + '</div>' +
          '</div>'
        );
      })
      .buttonContent(function(ctx) {
        // expanded nodes have children, collapsed ones only _children
        var colors = ctx.node.children ? cfg.buttonExpanded : cfg.buttonCollapsed;
        return (
          '<div style="border-radius:5px; padding:6px; font-size:18px; margin:auto auto; min-width:30px; height:30px; text-align:center; ' +
          'background-color:' + colors[0] + '; color:' + colors[1] + ';">' + ctx.node.data.totalDescendants + '</div>'
        );
      })
      .render();

    document.getElementById('zoom-out').onclick = function() { chart.zoomOut(); };
    document.getElementById('zoom-in').onclick = function() { chart.zoomIn(); };
    document.getElementById('fit').onclick = function() { chart.fit(); };
    document.getElementById('compact').onclick = function() {
      isCompact = !isCompact;
      chart.compact(isCompact).render().fit();
    };
  </script>
</body>
</html>
'''


def _script_json(value):
    # keep "</script>" inside a name from closing the tag
    return json.dumps(value, indent=2).replace("</", "<\\/")


def chart_settings(config):
    """ChartConfig -> the camelCase object the page script reads."""
    return {
        "nodeWidth": config.node_width,
        "nodeHeight": config.node_height,
        "rootMargin": config.root_margin,
        "compact": config.compact,
        "imageSize": config.image_size,
        "buttonExpanded": list(config.button_expanded),
        "buttonCollapsed": list(config.button_collapsed),
        "linkColor": config.link_color,
        "linkHighlightColor": config.link_highlight_color,
    }


def render_html(records, config=None):
    """Standalone page for already-enriched records."""
    config = config or ChartConfig()
    return (
        HTML_TEMPLATE
        .replace("__D3_URL__", D3_URL)
        .replace("__FLEXTREE_URL__", FLEXTREE_URL)
        .replace("__ORG_CHART_URL__", ORG_CHART_URL)
        .replace("__CHART_CONFIG__", _script_json(chart_settings(config)))
        .replace("__ORG_DATA__", _script_json(list(records)))
    )


def write_html(records, path, config=None, open_browser=False):
    html = render_html(records, config)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)

    log.info(f"OrgChart HTML generated: {path}")

    if open_browser:
        abs_path = os.path.abspath(path)
        webbrowser.open(f"file://{abs_path}")

    return path
