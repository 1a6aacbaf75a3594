from optscan import graph, parser


def test_graph_nodes_and_edges():
    _, steps = parser.trace(["make", "-j", "4", ""])
    g = graph.build(steps, title="make")
    src = g.source

    assert "args" in src
    assert '"opts(j)"' in src
    assert src.count("->") == len(steps)


def test_graph_single_state():
    _, steps = parser.trace(["a", "b"])
    src = graph.build(steps).source

    assert "opts(" not in src
    assert src.count("->") == 2


def test_graph_colon_key_keeps_one_node():
    _, steps = parser.trace(["--prop:arch", "x86"])
    src = graph.build(steps).source

    assert 'label="opts(prop:arch)"' in src
    assert "s0 -> s1" in src
    assert "s1 -> s1" in src
    assert '"opts(prop":' not in src


def test_graph_title_is_escaped():
    _, steps = parser.trace(["--x=a<b", "--q=a&b"])
    src = graph.build(steps, title="--x=a<b --q=a&b").source

    assert "<B>--x=a&lt;b --q=a&amp;b</B>" in src
    assert "a<b</B>" not in src
