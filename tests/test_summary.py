from fossflow_ai.diagram.normalizer import normalize_compact_diagram
from fossflow_ai.diagram.summary import generate_diagram_summary


RAW = {
    "t": "Demo",
    "i": [["A", "block"], ["B", "unknown_icon_xyz"]],
    "v": [[[[0, 0, 0]], [[0, 1]]]],
}


def test_summary_of_raw_payload():
    assert generate_diagram_summary(RAW) == (
        "📊 Demo\n"
        "\n"
        "🔲 2 item(s):\n"
        "  • A (block)\n"
        "  • B (unknown_icon_xyz)\n"
        "\n"
        "🔗 1 connector(s):\n"
        "  • A → B"
    )


def test_summary_of_normalized_diagram_shows_resolved_icons():
    text = generate_diagram_summary(normalize_compact_diagram(RAW))
    assert "  • B (block)" in text


def test_summary_tolerates_garbage():
    text = generate_diagram_summary({"i": [["", ""], "x"], "v": [[[], [[0, 5], [1]]]]})
    assert text.startswith("📊 Untitled")
    assert "  • Item 1 (block)" in text
    assert "🔗 2 connector(s):" in text
    assert "  • Item 1 → Item 6" in text


def test_summary_of_non_dict():
    assert generate_diagram_summary(None).startswith("📊 Untitled")
