"""HTML pages for the graph debug view."""

import html
import json
from string import Template

from devgraph.models.display import DisplayGraph, GraphMeta

DEBUG_PREFIX = "/debug/v2"

GRAPH_PAGE = Template("""<!DOCTYPE html>
<html>
<head>
    <title>$title</title>
    <style>
        #network-container {
            width: 100%;
            height: 100vh;
            border: 1px solid #ccc;
        }
    </style>
    <script type="text/javascript" src="https://unpkg.com/vis-network@9.1.2/standalone/umd/vis-network.min.js"></script>
</head>
<body>
    <div id="network-container"></div>

    <script type="text/javascript">
        function getGroupColor(type) {
            var colorMap = {
                'start': {background: '#4CAF50', border: '#388E3C'},
                'end': {background: '#F44336', border: '#D32F2F'},
                'parallel': {background: '#2196F3', border: '#1976D2'},
                'branch': {background: '#FFC107', border: '#FFA000'},
                'Lambda': {background: '#9C27B0', border: '#7B1FA2'},
                'Passthrough': {background: '#00BCD4', border: '#0097A7'}
            };
            return colorMap[type] || {background: '#9E9E9E', border: '#616161'};
        }

        var nodes = new vis.DataSet($nodes.map(function (node) {
            return {
                id: node.key,
                label: node.label,
                group: node.type,
                shape: 'box',
                font: {size: 14},
                color: getGroupColor(node.type)
            };
        }));

        var edges = new vis.DataSet($edges);

        var container = document.getElementById('network-container');
        var options = {
            nodes: {
                margin: 15,
                shape: 'box',
                widthConstraint: {maximum: 150}
            },
            edges: {
                arrows: 'to',
                smooth: {type: 'cubicBezier', forceDirection: 'horizontal'}
            },
            layout: {
                hierarchical: {
                    enabled: true,
                    direction: 'LR',
                    sortMethod: 'directed',
                    nodeSpacing: 120,
                    levelSeparation: 200,
                    shakeTowards: 'roots'
                }
            },
            physics: {
                hierarchicalRepulsion: {
                    nodeDistance: 200,
                    centralGravity: 0,
                    springLength: 200,
                    springConstant: 0.01,
                    damping: 0.09
                },
                solver: 'hierarchicalRepulsion'
            },
            interaction: {dragNodes: true, dragView: true, zoomView: true}
        };

        var network = new vis.Network(container, {nodes: nodes, edges: edges}, options);
        network.on('stabilizationIterationsDone', function () {
            network.fit({animation: {duration: 800, easingFunction: 'easeInOutQuad'}});
        });
    </script>
</body>
</html>
""")

GRAPH_LIST_PAGE = Template("""<!DOCTYPE html>
<html>
<head>
    <title>Graphs</title>
    <style>a {text-decoration: none;}</style>
</head>
<body>
    <p><a href="$home">&lt;&lt; Graphs</a></p>
    <table>
        <thead>
            <tr><td>Graphs</td></tr>
        </thead>
        <tbody>
$rows
        </tbody>
    </table>
</body>
</html>
""")


def _script_json(value) -> str:
    # keep "</script>" inside labels from closing the script element
    return json.dumps(value).replace("</", "<\\/")


def render_graph_page(display: DisplayGraph, title: str = "Workflow Visualization") -> str:
    nodes = [node.model_dump() for node in display.nodes]
    edges = [edge.model_dump(by_alias=True) for edge in display.edges]
    return GRAPH_PAGE.substitute(
        title=html.escape(title),
        nodes=_script_json(nodes),
        edges=_script_json(edges),
    )


def render_graph_list(graphs: list[GraphMeta], home: str) -> str:
    rows = "\n".join(
        f'            <tr><td><a href="{html.escape(meta.href)}">'
        f"{html.escape(meta.id)}/{html.escape(meta.name)}</a></td></tr>"
        for meta in graphs
    )
    return GRAPH_LIST_PAGE.substitute(home=html.escape(home), rows=rows)
