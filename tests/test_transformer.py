"""Tests for the Transformer."""

import pytest

from htmltomd.conversion import TextCleaner, Transformer
from htmltomd.markdown import List, Table


@pytest.fixture
def transformer():
    return Transformer()


class TestRemoveScripts:
    """Tests for removing script elements."""

    def test_removes_scripts_styles_and_links(self, parse, transformer):
        """Test style, script and link elements are removed."""
        doc = parse(
            """
<html>
    <head>
        <link rel="stylesheet" href="styles.css" type="text/css" />
        <style type="text/css">
        html {
            font-size: 14px;
        }
        </style>
        <script type="text/javascript" src="script.js"></script>
    </head>
    <body>
        <h1>Hello!</h1>
        <script type="text/javascript">
        var i = 0;
        </script>
        <script type="text/javascript" src="script.js"></script>
    </body>
</html>
"""
        )
        html = doc.find("html")

        transformer.remove_scripts(html)

        assert html.find("head").find_all(True) == []
        assert html.find("body").find_all("script") == []
        assert html.get_text().strip() == "Hello!"


class TestToList:
    """Tests for list extraction."""

    def test_unordered_list(self, parse, transformer):
        """Test ul becomes an unordered list."""
        doc = parse("<ul><li>unordered item 1</li><li>unordered item 2</li></ul>")

        result = transformer.to_list(doc.find("ul"))

        assert isinstance(result, List)
        assert result.render() == "* unordered item 1\n* unordered item 2"

    def test_ordered_list(self, parse, transformer):
        """Test ol becomes an ordered list."""
        doc = parse("<ol><li>ordered item 1</li><li>ordered item 2</li></ol>")

        assert transformer.to_list(doc.find("ol")).render() == "1. ordered item 1\n1. ordered item 2"

    def test_items_have_inline_rewrites(self, parse, transformer):
        """Test list items get bold and link rewrites."""
        doc = parse('<ul><li><strong>Bold</strong> and <a href="/x">link</a></li></ul>')

        assert transformer.to_list(doc.find("ul")).items == ["**Bold** and [link](/x)"]

    def test_only_direct_items(self, parse, transformer):
        """Test nested list items are folded into their parent item."""
        doc = parse("<ul><li>Parent<ul><li>Child</li></ul></li></ul>")

        assert transformer.to_list(doc.find("ul")).items == ["ParentChild"]


class TestToTable:
    """Tests for table extraction."""

    def test_without_head_and_body(self, parse, transformer):
        """Test th row becomes the header and is not repeated as a row."""
        doc = parse(
            """
<table>
    <tr>
        <th>Column 1</th>
        <th>Column 2</th>
    </tr>
    <tr>
        <td>Data 1</td>
        <td>Data 2</td>
    </tr>
</table>
"""
        )

        result = transformer.to_table(doc.find("table"))

        assert isinstance(result, Table)
        assert result.render() == "| Column 1 | Column 2 |\n| --- | --- |\n| Data 1 | Data 2 |"

    def test_without_headers(self, parse, transformer):
        """Test table of only td cells has no header."""
        doc = parse(
            """
<table>
    <tr><td>Data 1,1</td><td>Data 1,2</td></tr>
    <tr><td>Data 2,1</td><td>Data 2,2</td></tr>
</table>
"""
        )

        result = transformer.to_table(doc.find("table")).render()

        assert result == "| Data 1,1 | Data 1,2 |\n| Data 2,1 | Data 2,2 |"

    def test_with_head_and_body(self, parse, transformer):
        """Test thead and tbody are used for headers and rows."""
        doc = parse(
            """
<table>
    <thead>
        <tr><th>Column 1</th><th>Column 2</th></tr>
    </thead>
    <tbody>
        <tr><td>Data 1</td><td>Data 2</td></tr>
    </tbody>
</table>
"""
        )

        result = transformer.to_table(doc.find("table")).render()

        assert result == "| Column 1 | Column 2 |\n| --- | --- |\n| Data 1 | Data 2 |"

    def test_head_without_row(self, parse, transformer):
        """Test th cells directly under thead are headers."""
        doc = parse(
            """
<table>
    <thead>
        <th>Column 1</th>
        <th>Column 2</th>
    </thead>
    <tr><td>Data 1</td><td>Data 2</td></tr>
</table>
"""
        )

        result = transformer.to_table(doc.find("table")).render()

        assert result == "| Column 1 | Column 2 |\n| --- | --- |\n| Data 1 | Data 2 |"

    def test_td_as_headers_in_thead(self, parse, transformer):
        """Test td cells in thead are headers when there are no th."""
        doc = parse(
            """
<table>
    <thead>
        <td>Column 1</td>
        <td>Column 2</td>
    </thead>
    <tr><td>Data 1</td><td>Data 2</td></tr>
</table>
"""
        )

        result = transformer.to_table(doc.find("table")).render()

        assert result == "| Column 1 | Column 2 |\n| --- | --- |\n| Data 1 | Data 2 |"

    def test_td_header_row_not_repeated(self, parse, transformer):
        """Test a td header row in thead is not repeated as a body row."""
        doc = parse(
            """
<table>
    <thead>
        <tr><td>Column 1</td><td>Column 2</td></tr>
    </thead>
    <tr><td>Data 1</td><td>Data 2</td></tr>
</table>
"""
        )

        result = transformer.to_table(doc.find("table")).render()

        assert result == "| Column 1 | Column 2 |\n| --- | --- |\n| Data 1 | Data 2 |"

    def test_multiple_header_rows(self, parse, transformer):
        """Test only the first header row is kept."""
        doc = parse(
            """
<table>
    <thead>
        <tr><th>Column 1</th><th>Column 2</th></tr>
        <tr><th>Column 3</th><th>Column 4</th></tr>
    </thead>
    <tr><td>Data 1</td><td>Data 2</td></tr>
</table>
"""
        )

        result = transformer.to_table(doc.find("table")).render()

        assert result == "| Column 1 | Column 2 |\n| --- | --- |\n| Data 1 | Data 2 |"

    def test_empty_table(self, parse, transformer):
        """Test an empty table renders nothing."""
        doc = parse("<table></table>")

        result = transformer.to_table(doc.find("table"))

        assert result.headers == []
        assert result.rows == []
        assert result.render() == ""


class TestInlineRewrites:
    """Tests for inline element rewrites."""

    def test_rewrites_all(self, parse, transformer):
        """Test links, bold, italics and inline code are rewritten."""
        doc = parse(
            """
<body>
    <h1>This is a <a href="mock://example.com">Link</a></h1>
    <p>
        This is a <strong>bold statement</strong>. This is an <em>italicized statement</em>. This is <code>inline code</code>.
    </p>
</body>
"""
        )

        assert transformer.text(doc.find("h1")) == "This is a [Link](mock://example.com)"
        assert transformer.text(doc.find("p")) == (
            "This is a **bold statement**. This is an _italicized statement_. This is `inline code`."
        )

    def test_image(self, parse, transformer):
        """Test images become markdown images."""
        doc = parse('<p><img src="mock://example.com" alt="Test Image" /></p>')

        assert transformer.text(doc.find("p")) == "![Test Image](mock://example.com)"

    def test_image_for_hugo(self, parse):
        """Test images become figure shortcodes for Hugo."""
        transformer = Transformer(output_format="hugo")
        doc = parse('<p><img src="images/a.png" alt="A" /></p>')

        assert transformer.text(doc.find("p")) == '{{< figure src="./images/a.png" alt="A" >}}'

    def test_image_without_alt(self, parse, transformer):
        """Test missing alt text renders empty."""
        doc = parse('<p><img src="a.png"></p>')

        assert transformer.text(doc.find("p")) == "![](a.png)"

    def test_anchor_without_href(self, parse, transformer):
        """Test anchors without href are left as text."""
        doc = parse('<p><a name="top">Anchor</a> text</p>')

        assert transformer.text(doc.find("p")) == "Anchor text"

    def test_image_without_src(self, parse, transformer):
        """Test images without src are left untouched."""
        doc = parse('<p>Before<img alt="missing">After</p>')

        assert transformer.text(doc.find("p")) == "BeforeAfter"

    def test_bold_wins_over_nested_italic(self, parse, transformer):
        """Test italics inside bold collapse to plain text."""
        doc = parse("<p><strong>a <em>b</em></strong></p>")

        assert transformer.text(doc.find("p")) == "**a b**"

    def test_bold_inside_italic(self, parse, transformer):
        """Test bold inside italics is kept."""
        doc = parse("<p><em><strong>x</strong></em></p>")

        assert transformer.text(doc.find("p")) == "_**x**_"

    def test_nested_formatting_inside_link(self, parse, transformer):
        """Test bold and italics inside a link are kept."""
        doc = parse('<p><a href="u"><em><strong>x</strong> y</em></a></p>')

        assert transformer.text(doc.find("p")) == "[_**x** y_](u)"

    def test_image_inside_link(self, parse, transformer):
        """Test an image inside a link leaves the link text empty."""
        doc = parse('<p><a href="u"><img src="i.png" alt="I"></a></p>')

        assert transformer.text(doc.find("p")) == "[](u)"

    def test_formatting_inside_code(self, parse, transformer):
        """Test bold inside inline code is kept."""
        doc = parse("<p><code><strong>x</strong></code></p>")

        assert transformer.text(doc.find("p")) == "`**x**`"

    def test_code_inside_link(self, parse, transformer):
        """Test inline code inside a link collapses to plain text."""
        doc = parse('<p><a href="u"><code>x</code></a></p>')

        assert transformer.text(doc.find("p")) == "[x](u)"

    def test_code_keeps_literal_content(self, parse, transformer):
        """Test escaped markup in inline code is kept literally."""
        doc = parse("<p><code>a &lt; b</code></p>")

        assert transformer.text(doc.find("p")) == "`a < b`"

    def test_scripts_and_comments_ignored(self, parse, transformer):
        """Test scripts and comments contribute no text."""
        doc = parse("<p>Hi<script>run()</script><!-- note --> there</p>")

        assert transformer.text(doc.find("p")) == "Hi there"

    def test_element_not_modified(self, parse, transformer):
        """Test collecting text leaves the element unchanged."""
        doc = parse("<p><strong>bold</strong></p>")
        p = doc.find("p")

        transformer.text(p)

        assert p.find("strong") is not None
        assert p.get_text() == "bold"

    def test_plain_text(self, parse, transformer):
        """Test plain text skips every rewrite."""
        doc = parse('<p><strong>a</strong> <a href="u">b</a></p>')

        assert transformer.plain_text(doc.find("p")) == "a b"

    def test_uses_text_cleaner(self, parse):
        """Test the configured cleaner is applied to the text."""
        transformer = Transformer(text_cleaner=TextCleaner(ascii_only=False))
        doc = parse("<p><em>Tëst</em></p>")

        assert transformer.text(doc.find("p")) == "_Tëst_"
